"""
Date/time value carried by reminder annotations.

A reminder time is a calendar date with an optional time of day. Its string
form is what gets written verbatim between the trigger marker and the closing
parenthesis, e.g. ``(@2026-02-15)`` or ``(@2026-02-15 09:30)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
DATE_TIME_FORMAT = "%Y-%m-%d %H:%M"
DEFAULT_TIME = time(9, 0)


@dataclass(frozen=True)
class DateTime:
    """A date with an optional time-of-day part."""

    date_part: date
    time_part: Optional[time] = None

    @property
    def has_time_part(self) -> bool:
        return self.time_part is not None

    @classmethod
    def of(cls, value: datetime) -> DateTime:
        """Build a DateTime with a time part (seconds are dropped)."""
        return cls(value.date(), value.time().replace(second=0, microsecond=0))

    def to_datetime(self, default_time: time = DEFAULT_TIME) -> datetime:
        """Combine into a datetime, filling a missing time part with ``default_time``."""
        return datetime.combine(self.date_part, self.time_part or default_time)

    def format(self, date_only: bool = False) -> str:
        if date_only or self.time_part is None:
            return self.date_part.strftime(DATE_FORMAT)
        return self.to_datetime().strftime(DATE_TIME_FORMAT)

    def __str__(self) -> str:
        return self.format()
