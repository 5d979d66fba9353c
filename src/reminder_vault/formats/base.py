"""
Reminder format contracts and shared configuration.

A reminder format knows how to find reminders in a MarkdownDocument and how
to write edits back into it. Formats work through a ReminderModel: a parsed
view of one line exposing a small capability set (title, time, raw time).
Different line syntaxes are different ReminderModel implementations.
"""

import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from reminder_vault.models.reminder import Reminder, ReminderEdit, ReminderInsertion
from reminder_vault.models.time import DateTime
from reminder_vault.parsers.markdown import MarkdownDocument


class ReminderFormatParameterKey(Enum):
    """Configuration keys understood by reminder formats, with their defaults."""

    LINK_DATES_TO_DAILY_NOTES = ("linkDatesToDailyNotes", False)

    def __init__(self, key: str, default: Any) -> None:
        self.key = key
        self.default = default


class ReminderFormatConfig:
    """Parameter store consulted by formats while parsing and editing."""

    def __init__(self, parameters: Optional[Dict[ReminderFormatParameterKey, Any]] = None) -> None:
        self._parameters: Dict[ReminderFormatParameterKey, Any] = dict(parameters or {})

    @classmethod
    def from_env(cls) -> "ReminderFormatConfig":
        """Build a config from environment variables (LINK_DATES_TO_DAILY_NOTES)."""
        config = cls()
        raw = os.environ.get("LINK_DATES_TO_DAILY_NOTES")
        if raw is not None:
            config.set_parameter(
                ReminderFormatParameterKey.LINK_DATES_TO_DAILY_NOTES,
                raw.lower() in ("true", "1", "yes"),
            )
        return config

    def get_parameter(self, key: ReminderFormatParameterKey) -> Any:
        return self._parameters.get(key, key.default)

    def set_parameter(self, key: ReminderFormatParameterKey, value: Any) -> None:
        self._parameters[key] = value


class ReminderModel(ABC):
    """
    Parsed view of a single reminder line.

    Implementations must provide parse(), get_title() and get_time().
    set_raw_time() is optional: the default reports it as unsupported.
    """

    @classmethod
    @abstractmethod
    def parse(cls, line: str, link_dates_to_daily_notes: bool = False) -> Optional["ReminderModel"]:
        """
        Parse a line into a model.

        Args:
            line: Raw line text
            link_dates_to_daily_notes: Whether dates are wrapped as [[wiki-links]]

        Returns:
            Model instance, or None if the line is not a reminder in this syntax
        """
        pass

    @abstractmethod
    def get_title(self) -> Optional[str]:
        pass

    @abstractmethod
    def get_time(self) -> Optional[DateTime]:
        pass

    def set_raw_time(self, raw_time: str) -> bool:
        """
        Replace the time with unparsed text.

        Returns:
            True if the model accepted the raw text, False if unsupported
        """
        return False


class ReminderFormat(ABC):
    """Finds reminders in a document and applies edits to them."""

    @abstractmethod
    def set_config(self, config: ReminderFormatConfig) -> None:
        pass

    @abstractmethod
    def parse(self, doc: MarkdownDocument) -> List[Reminder]:
        """
        Collect every reminder in the document.

        Lines that look like reminders but have no usable title or time are
        skipped, not reported.
        """
        pass

    @abstractmethod
    async def modify(self, doc: MarkdownDocument, reminder: Reminder, edit: ReminderEdit) -> bool:
        """
        Apply ``edit`` to the line at ``reminder.row_number``.

        Returns:
            True if every requested change was applied, False otherwise
        """
        pass

    @abstractmethod
    def append_reminder(
        self, line: str, time: DateTime, insert_at: Optional[int] = None
    ) -> Optional[ReminderInsertion]:
        pass
