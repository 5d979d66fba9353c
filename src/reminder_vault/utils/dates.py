"""
Date/time parsing utilities.

Two entry points:
    parse_date_time(text)    strict; the only shapes accepted inside a
                             reminder annotation ("2026-02-15", "2026-02-15 09:30")
    resolve_date_time(text)  loose; what a person types into a tool call
                             ("tomorrow", "friday 14:00", "in 3 days")
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from reminder_vault.models.time import DATE_FORMAT, DATE_TIME_FORMAT, DateTime

_DAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_TRAILING_TIME = re.compile(r"^(?P<day>.*?)\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})$")


def parse_date_time(text: str) -> Optional[DateTime]:
    """
    Parse an annotation payload into a DateTime.

    Returns:
        DateTime, or None if the text is not exactly a date or a date + HH:MM
    """
    if not text:
        return None

    text = text.strip()
    try:
        return DateTime.of(datetime.strptime(text, DATE_TIME_FORMAT))
    except ValueError:
        pass

    try:
        return DateTime(datetime.strptime(text, DATE_FORMAT).date())
    except ValueError:
        return None


def _resolve_day(day_str: str, today: date) -> Optional[date]:
    day_lower = day_str.strip().lower()

    if day_lower in ("", "today", "now"):
        return today
    if day_lower == "tomorrow":
        return today + timedelta(days=1)

    try:
        return datetime.strptime(day_lower, DATE_FORMAT).date()
    except ValueError:
        pass

    is_next = day_lower.startswith("next ")
    if is_next:
        day_lower = day_lower[5:].strip()

    for i, day_name in enumerate(_DAY_NAMES):
        if day_lower == day_name:
            days_ahead = i - today.weekday()
            if days_ahead <= 0 or is_next:
                days_ahead += 7
            return today + timedelta(days=days_ahead)

    relative_match = re.match(r"in (\d+) (days?|weeks?)$", day_lower)
    if relative_match:
        amount = int(relative_match.group(1))
        unit = relative_match.group(2)
        delta = timedelta(weeks=amount) if unit.startswith("week") else timedelta(days=amount)
        return today + delta

    return None


def resolve_date_time(text: str, today: Optional[date] = None) -> Optional[DateTime]:
    """
    Parse free-form user input into a DateTime.

    Supports:
    - Strict annotation forms: "2026-02-15", "2026-02-15 09:30"
    - Keywords: "today", "tomorrow"
    - Day names: "friday", "next monday"
    - Relative: "in 3 days", "in 2 weeks"
    - Any of the above followed by "HH:MM": "tomorrow 10:00"

    Returns:
        DateTime or None if unparseable
    """
    if not text or not text.strip():
        return None

    strict = parse_date_time(text)
    if strict is not None:
        return strict

    today = today or datetime.now().date()
    text = text.strip()

    time_part = None
    m = _TRAILING_TIME.match(text)
    if m:
        hour, minute = int(m.group("hour")), int(m.group("minute"))
        if hour > 23 or minute > 59:
            return None
        time_part = datetime.min.time().replace(hour=hour, minute=minute)
        text = m.group("day")

    day = _resolve_day(text, today)
    if day is None:
        return None
    return DateTime(day, time_part)
