from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from ..billing.calculator.base import FareCalculator
from ..billing.calculator.standard_calculator import StandardFareCalculator
from ..common.money import ZERO
from ..core.enums import RideStatus
from ..rides.model import Ride
from .selectors import in_window, partition_parseable, select, status_is
from .windows import TimeWindows, Window


@dataclass(frozen=True)
class EarningsSnapshot:
    today: Decimal
    week: Decimal
    month: Decimal
    today_completed: int = 0
    week_completed: int = 0
    month_completed: int = 0
    scheduled_today: int = 0
    skipped: int = 0


def _total(rides: Iterable[Ride], calculator: FareCalculator) -> Decimal:
    return sum((calculator.billable_amount(r) for r in rides), ZERO)


def earnings(rides: Iterable[Ride], now: datetime, calculator: Optional[FareCalculator] = None) -> EarningsSnapshot:
    """Completed-ride earnings for today, this week and this month around `now`.

    A ride counts toward every window that contains its pickup time. Absent
    rides add nothing even when completed with a fare.
    """
    calculator = calculator or StandardFareCalculator()
    valid, skipped = partition_parseable(rides)
    windows = TimeWindows.at(now)

    def completed_in(window: Window) -> list[Ride]:
        return select(valid, status_is(RideStatus.COMPLETED), in_window(window))

    today = completed_in(windows.today)
    week = completed_in(windows.week)
    month = completed_in(windows.month)

    return EarningsSnapshot(
        today=_total(today, calculator),
        week=_total(week, calculator),
        month=_total(month, calculator),
        today_completed=len(today),
        week_completed=len(week),
        month_completed=len(month),
        scheduled_today=len(select(valid, status_is(RideStatus.SCHEDULED), in_window(windows.today))),
        skipped=skipped,
    )
