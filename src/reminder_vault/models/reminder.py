"""
Reminder domain objects exchanged between formats and callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from reminder_vault.models.time import DateTime


@dataclass
class Reminder:
    """A scheduled item derived from a trigger line in a markdown file."""

    file: str
    title: str
    time: DateTime
    row_number: int
    completed: bool = False

    @property
    def key(self) -> str:
        """Location reference in 'file:row' format."""
        return f"{self.file}:{self.row_number}"


@dataclass
class ReminderEdit:
    """
    Changes to apply to a reminder line.

    Fields left as None are not touched. ``raw_time`` takes precedence over
    ``time`` when both are given.
    """

    checked: Optional[bool] = None
    time: Optional[DateTime] = None
    raw_time: Optional[str] = None


@dataclass
class ReminderInsertion:
    """A new reminder line and where the editor caret should land in it."""

    inserted_line: str
    caret_position: int


@dataclass
class TodoEdit:
    checked: Optional[bool] = None
    body: Optional[str] = None
