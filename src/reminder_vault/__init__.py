"""
Round-trip safe todo and reminder editing for markdown files.

Main API:
    from reminder_vault import MarkdownDocument, PlainReminderFormat, ReminderEdit

    doc = MarkdownDocument("daily.md", content)
    fmt = PlainReminderFormat()
    reminders = fmt.parse(doc)

    await fmt.modify(doc, reminders[0], ReminderEdit(checked=True))
    doc.to_markdown()  → content with only that annotation removed
"""

from .models import DateTime, Reminder, ReminderEdit, ReminderInsertion, TodoEdit
from .parsers import MarkdownDocument, Todo, TriggerConfig, TriggerLine
from .formats import (
    PlainReminderFormat,
    PlainReminderModel,
    ReminderFormat,
    ReminderFormatConfig,
    ReminderFormatParameterKey,
    ReminderModel,
)
from .utils import parse_date_time, resolve_date_time

__all__ = [
    # Models
    "DateTime",
    "Reminder",
    "ReminderEdit",
    "ReminderInsertion",
    "TodoEdit",
    # Document
    "MarkdownDocument",
    "Todo",
    "TriggerLine",
    "TriggerConfig",
    # Formats
    "ReminderFormat",
    "ReminderFormatConfig",
    "ReminderFormatParameterKey",
    "ReminderModel",
    "PlainReminderFormat",
    "PlainReminderModel",
    # Dates
    "parse_date_time",
    "resolve_date_time",
]
