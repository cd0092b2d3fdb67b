from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Iterable

from ..common.datetime_utils import end_of_day, start_of_day
from ..core.constants import TRAILING_MONTH_DAYS, TRAILING_WEEK_DAYS
from ..core.enums import Attendance, RidePeriod, RideStatus
from ..rides.model import Ride
from .windows import Month, TimeWindows, Window

logger = logging.getLogger(__name__)

RidePredicate = Callable[[Ride], bool]


def select(rides: Iterable[Ride], *predicates: RidePredicate) -> list[Ride]:
    """Rides matching every predicate, in input order."""
    return [r for r in rides if all(p(r) for p in predicates)]


def in_window(window: Window) -> RidePredicate:
    return lambda r: window.contains(r.pickup_at)


def in_month(month: Month) -> RidePredicate:
    return in_window(month.window)


def status_is(status: RideStatus) -> RidePredicate:
    return lambda r: r.status == status


def attendance_is(attendance: Attendance) -> RidePredicate:
    return lambda r: r.attendance == attendance


def for_passenger(passenger_id: str) -> RidePredicate:
    return lambda r: r.passenger_id is not None and r.passenger_id == passenger_id


def partition_parseable(rides: Iterable[Ride]) -> tuple[list[Ride], int]:
    """Split off rides whose pickup time cannot be parsed.

    Returns the usable rides (input order) and how many were left out.
    """
    valid: list[Ride] = []
    skipped = 0
    for r in rides:
        if r.pickup_at is None:
            skipped += 1
            logger.warning("Ignoring ride %s: unreadable pickup_time %r", r.ride_id, r.pickup_time)
            continue
        valid.append(r)
    return valid, skipped


def today_rides(rides: Iterable[Ride], now: datetime) -> list[Ride]:
    return select(rides, in_window(TimeWindows.at(now).today))


def week_rides(rides: Iterable[Ride], now: datetime) -> list[Ride]:
    return select(rides, in_window(TimeWindows.at(now).week))


def month_rides(rides: Iterable[Ride], now: datetime) -> list[Ride]:
    return select(rides, in_window(TimeWindows.at(now).month))


def recent_rides(rides: Iterable[Ride], now: datetime, period: RidePeriod = RidePeriod.ALL) -> list[Ride]:
    """Ride list filter: today, or trailing 7/30 days counted back from `now`."""
    if period == RidePeriod.ALL:
        return list(rides)
    if period == RidePeriod.TODAY:
        return select(rides, in_window(Window(start_of_day(now), end_of_day(now))))

    days = TRAILING_WEEK_DAYS if period == RidePeriod.WEEK else TRAILING_MONTH_DAYS
    since = now - timedelta(days=days)
    return select(rides, lambda r: r.pickup_at is not None and r.pickup_at >= since)
