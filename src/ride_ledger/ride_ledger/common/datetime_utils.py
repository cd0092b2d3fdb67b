from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from ..core.constants import WEEK_START_WEEKDAY


def now_local() -> datetime:
    """Current local time.

    Note: Only the outer layers call this; aggregation functions take `now` explicitly.
    """
    return datetime.now()


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local wall-clock time (naive values pass through)."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse a stored timestamp into naive local time.

    Accepts datetime, date and ISO-8601 strings (a trailing "Z" is read as UTC).
    Returns None when the value cannot be read as a point in time.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return to_local_naive(datetime.fromisoformat(text))
    except ValueError:
        return None


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max)


def start_of_week(value: datetime) -> datetime:
    """Start of the week containing `value`; weeks start on Sunday."""
    offset = (value.weekday() - WEEK_START_WEEKDAY) % 7
    return start_of_day(value - timedelta(days=offset))


def end_of_week(value: datetime) -> datetime:
    return end_of_day(start_of_week(value) + timedelta(days=6))
