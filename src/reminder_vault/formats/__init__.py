from .base import (
    ReminderFormat,
    ReminderFormatConfig,
    ReminderFormatParameterKey,
    ReminderModel,
)
from .plain import PlainReminderFormat, PlainReminderModel

__all__ = [
    "ReminderFormat",
    "ReminderFormatConfig",
    "ReminderFormatParameterKey",
    "ReminderModel",
    "PlainReminderFormat",
    "PlainReminderModel",
]
