from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import end_of_day, end_of_week, parse_instant, start_of_day, start_of_week, to_local_naive
from ..core.constants import MONTH_FORMAT
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Window:
    """Closed interval [start, end] of naive local datetimes."""

    start: datetime
    end: datetime

    def contains(self, instant: Optional[datetime]) -> bool:
        if instant is None:
            return False
        return self.start <= instant <= self.end


@dataclass(frozen=True, order=True)
class Month:
    """Calendar month selector used by the attendance grid and billing views."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= int(self.month) <= 12:
            raise ValidationError(f"Invalid month: {self.month}")

    @classmethod
    def of(cls, value: date | datetime) -> "Month":
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, value: str) -> "Month":
        """Parse YYYY-MM."""
        try:
            parsed = datetime.strptime((value or "").strip(), MONTH_FORMAT)
        except ValueError:
            raise ValidationError("Month must be formatted as YYYY-MM")
        return cls(parsed.year, parsed.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def start(self) -> datetime:
        return datetime.combine(self.first_day, time.min)

    @property
    def end(self) -> datetime:
        return datetime.combine(self.last_day, time.max)

    @property
    def window(self) -> Window:
        return Window(self.start, self.end)

    def days(self) -> list[date]:
        return [date(self.year, self.month, d) for d in range(1, self.last_day.day + 1)]

    def contains(self, instant: Optional[datetime]) -> bool:
        return self.window.contains(instant)

    def next(self) -> "Month":
        if self.month == 12:
            return Month(self.year + 1, 1)
        return Month(self.year, self.month + 1)

    def previous(self) -> "Month":
        if self.month == 1:
            return Month(self.year - 1, 12)
        return Month(self.year, self.month - 1)

    def label(self) -> str:
        return self.first_day.strftime("%B %Y")

    def __str__(self) -> str:
        return self.first_day.strftime(MONTH_FORMAT)


@dataclass(frozen=True)
class TimeWindows:
    """Today / this week (Sunday start) / this month, all relative to one `now`."""

    today: Window
    week: Window
    month: Window

    @classmethod
    def at(cls, now: datetime) -> "TimeWindows":
        return cls(
            today=Window(start_of_day(now), end_of_day(now)),
            week=Window(start_of_week(now), end_of_week(now)),
            month=Month.of(now).window,
        )


@dataclass(frozen=True)
class WindowMembership:
    in_today: bool
    in_this_week: bool
    in_this_month: bool


def classify(now: datetime, pickup: Optional[datetime]) -> WindowMembership:
    """Which of the windows around `now` contain `pickup`.

    The three flags are evaluated independently; a pickup that cannot be read
    belongs to none of them. Aware values are read as local wall-clock time.
    """
    windows = TimeWindows.at(to_local_naive(now))
    pickup = parse_instant(pickup)
    return WindowMembership(
        in_today=windows.today.contains(pickup),
        in_this_week=windows.week.contains(pickup),
        in_this_month=windows.month.contains(pickup),
    )
