"""
Plain reminder format: ``title (@2026-02-15 09:00) more title``.

The annotation may sit anywhere in a non-checkbox line. With the
linkDatesToDailyNotes option the date is written as a wiki-link,
``(@[[2026-02-15]] 09:00)``, and the brackets are ignored when reading.
"""

import logging
import re
from typing import List, Optional

from reminder_vault.formats.base import (
    ReminderFormat,
    ReminderFormatConfig,
    ReminderFormatParameterKey,
    ReminderModel,
)
from reminder_vault.models.reminder import Reminder, ReminderEdit, ReminderInsertion
from reminder_vault.models.time import DateTime
from reminder_vault.parsers.markdown import MarkdownDocument, TriggerLine
from reminder_vault.utils.dates import parse_date_time

log = logging.getLogger(__name__)


class PlainReminderModel(ReminderModel):
    """
    e.g. '- Call mom (@2026-01-01 10:00) at home'
        title1: ''  ("- " is dropped for tree items)
        time:   '2026-01-01 10:00'
        title2: ' at home'
    """

    REGEXP = re.compile(r"^(?P<title1>.*?)\(@(?P<time>.+?)\)(?P<title2>.*)$")

    def __init__(self, link_dates_to_daily_notes: bool, title1: str, time: str, title2: str) -> None:
        self.link_dates_to_daily_notes = link_dates_to_daily_notes
        self.title1 = title1
        self.time = time
        self.title2 = title2

    @classmethod
    def parse(cls, line: str, link_dates_to_daily_notes: Optional[bool] = None) -> Optional["PlainReminderModel"]:
        if link_dates_to_daily_notes is None:
            link_dates_to_daily_notes = False

        m = cls.REGEXP.match(line)
        if not m:
            return None

        title1 = m.group("title1")
        # Tree item: the list marker is not part of the title
        if title1 == "- ":
            title1 = ""

        time = m.group("time")
        if link_dates_to_daily_notes:
            time = time.replace("[[", "", 1).replace("]]", "", 1)

        return cls(link_dates_to_daily_notes, title1, time, m.group("title2"))

    def get_title(self) -> Optional[str]:
        return f"{self.title1.strip()} {self.title2.strip()}".strip()

    def get_time(self) -> Optional[DateTime]:
        return parse_date_time(self.time)

    def set_time(self, time: DateTime) -> None:
        if self.link_dates_to_daily_notes:
            date_str = time.format(date_only=True)
            self.time = str(time).replace(date_str, f"[[{date_str}]]", 1)
        else:
            self.time = str(time)

    def set_raw_time(self, raw_time: str) -> bool:
        self.time = raw_time
        return True

    def get_end_of_time_token_position(self) -> int:
        """Offset just past the closing parenthesis of the annotation."""
        return len(self.title1) + len("(@") + len(self.time) + len(")")

    def to_markdown(self) -> str:
        return f"{self.title1}(@{self.time}){self.title2}"

    def __repr__(self) -> str:
        return (
            f"PlainReminderModel(title1={self.title1!r}, time={self.time!r}, "
            f"title2={self.title2!r})"
        )


class PlainReminderFormat(ReminderFormat):
    """Reads and edits reminders carried by a document's trigger lines."""

    def __init__(self, config: Optional[ReminderFormatConfig] = None) -> None:
        self.config = config or ReminderFormatConfig()

    def set_config(self, config: ReminderFormatConfig) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def parse(self, doc: MarkdownDocument) -> List[Reminder]:
        reminders = []
        for trigger_line in doc.get_trigger_lines():
            parsed = self.parse_reminder(trigger_line.line)
            if parsed is None:
                continue
            title = parsed.get_title()
            if title is None:
                continue
            time = parsed.get_time()
            if time is None:
                continue
            # TODO: derive completed from the line once checked trigger lines keep a marker
            reminders.append(Reminder(doc.file, title, time, trigger_line.line_index, False))
        return reminders

    def parse_reminder(self, line: str) -> Optional[PlainReminderModel]:
        link_dates_to_daily_notes = self.config.get_parameter(
            ReminderFormatParameterKey.LINK_DATES_TO_DAILY_NOTES
        )
        return PlainReminderModel.parse(line, link_dates_to_daily_notes)

    def _parse_valid_reminder(self, line: str) -> Optional[PlainReminderModel]:
        parsed = self.parse_reminder(line)
        if parsed is None:
            return None
        if not self.is_valid_reminder(parsed):
            return None
        return parsed

    def is_valid_reminder(self, reminder: ReminderModel) -> bool:
        return reminder.get_time() is not None

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    async def modify(self, doc: MarkdownDocument, reminder: Reminder, edit: ReminderEdit) -> bool:
        trigger_line = doc.get_trigger_line(reminder.row_number)
        if trigger_line is None:
            return False
        parsed = self._parse_valid_reminder(trigger_line.line)
        if parsed is None:
            return False
        return self.modify_reminder(doc, trigger_line, parsed, edit)

    def modify_reminder(
        self,
        doc: MarkdownDocument,
        trigger_line: TriggerLine,
        parsed: ReminderModel,
        edit: ReminderEdit,
    ) -> bool:
        """
        Apply ``edit`` to ``trigger_line``.

        ``parsed`` is only consulted for validation and raw-time support; the
        new line is always built from the trigger line's own prefix and suffix.
        """
        if edit.raw_time is not None:
            if not parsed.set_raw_time(edit.raw_time):
                log.warning("The reminder doesn't support raw time: parsed=%r", parsed)
                return False
            trigger_line.set_raw_time(edit.raw_time)
        elif edit.time is not None:
            trigger_line.set_new_date_time(edit.time)

        if edit.checked is not None:
            trigger_line.set_checked(edit.checked)
        return True

    def append_reminder(
        self, line: str, time: DateTime, insert_at: Optional[int] = None
    ) -> Optional[ReminderInsertion]:
        # The existing line content is not carried over yet.
        return ReminderInsertion(
            inserted_line=f"(@{time}) Task 1",
            caret_position=insert_at if insert_at is not None else 0,
        )
