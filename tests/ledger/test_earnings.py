from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from src.ride_ledger.ride_ledger.core.enums import Attendance, RideStatus
from src.ride_ledger.ride_ledger.ledger.earnings import earnings
from src.ride_ledger.ride_ledger.rides.model import Ride


def make_ride(ride_id, pickup, fare, *, status=RideStatus.COMPLETED, attendance=Attendance.PRESENT):
    return Ride(
        ride_id=ride_id,
        passenger_name="A",
        pickup_location="Home",
        drop_location="School",
        pickup_time=pickup,
        fare=fare,
        status=status,
        attendance=attendance,
    )


def test_completed_present_ride_today_counts_in_every_window(fixed_now):
    snap = earnings([make_ride("r1", datetime(2025, 5, 14, 7, 0), 25)], fixed_now)

    assert snap.today == 25
    assert snap.week == 25
    assert snap.month == 25
    assert snap.today_completed == 1


def test_absent_ride_earns_nothing_even_when_completed(fixed_now):
    ride = make_ride("r1", datetime(2025, 5, 14, 7, 0), 25, attendance=Attendance.ABSENT)

    snap = earnings([ride], fixed_now)

    assert (snap.today, snap.week, snap.month) == (0, 0, 0)


def test_windows_are_independent(fixed_now):
    rides = [
        make_ride("today", datetime(2025, 5, 14, 8), 10),
        make_ride("monday", datetime(2025, 5, 12, 8), 20),
        make_ride("early-may", datetime(2025, 5, 2, 8), 40),
        make_ride("april", datetime(2025, 4, 30, 8), 80),
    ]

    snap = earnings(rides, fixed_now)

    assert snap.today == 10
    assert snap.week == 30
    assert snap.month == 70
    assert snap.month_completed == 3


def test_only_completed_rides_are_summed(fixed_now):
    rides = [
        make_ride("done", datetime(2025, 5, 14, 7), 25),
        make_ride("pending", datetime(2025, 5, 14, 15), 30, status=RideStatus.SCHEDULED),
        make_ride("driving", datetime(2025, 5, 14, 9), 30, status=RideStatus.IN_PROGRESS),
        make_ride("called-off", datetime(2025, 5, 14, 11), 30, status=RideStatus.CANCELLED),
    ]

    snap = earnings(rides, fixed_now)

    assert snap.today == 25
    assert snap.scheduled_today == 1


def test_amounts_are_exact_decimals(fixed_now):
    rides = [make_ride(str(i), datetime(2025, 5, 14, 7, i), "0.1") for i in range(3)]

    snap = earnings(rides, fixed_now)

    assert snap.today == Decimal("0.3")
    assert isinstance(snap.today, Decimal)


def test_bad_fares_count_as_zero(fixed_now):
    rides = [
        make_ride("text", datetime(2025, 5, 14, 7), "twenty"),
        make_ride("missing", datetime(2025, 5, 14, 8), None),
        make_ride("nan", datetime(2025, 5, 14, 9), float("nan")),
        make_ride("ok", datetime(2025, 5, 14, 10), 12.5),
    ]

    assert earnings(rides, fixed_now).today == Decimal("12.5")


def test_unreadable_pickups_are_skipped_and_reported(fixed_now):
    rides = [
        make_ride("ok", "2025-05-14T07:00:00", 25),
        make_ride("bad", "14/05/2025 7am", 25),
    ]

    snap = earnings(rides, fixed_now)

    assert snap.today == 25
    assert snap.skipped == 1


def test_empty_input_gives_zero_snapshot(fixed_now):
    snap = earnings([], fixed_now)

    assert (snap.today, snap.week, snap.month, snap.skipped) == (0, 0, 0, 0)


def test_same_snapshot_gives_same_result(fixed_now):
    rides = [make_ride("a", datetime(2025, 5, 12, 8), 20), make_ride("b", datetime(2025, 5, 14, 8), 5)]
    assert earnings(rides, fixed_now) == earnings(rides, fixed_now)
