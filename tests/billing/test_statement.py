from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.ride_ledger.ride_ledger.billing.statement import build_statement, summarize
from src.ride_ledger.ride_ledger.core.enums import Attendance, RideStatus
from src.ride_ledger.ride_ledger.ledger.windows import Month
from src.ride_ledger.ride_ledger.passengers.model import Passenger
from src.ride_ledger.ride_ledger.rides.model import Ride

JUNE = Month(2025, 6)


def ride(rid, name, day, fare, *, pid=None, status=RideStatus.COMPLETED, attendance=Attendance.PRESENT):
    return Ride(
        ride_id=rid,
        passenger_id=pid,
        passenger_name=name,
        pickup_location="Home",
        drop_location="Office",
        pickup_time=datetime(2025, 6, day, 7, 30),
        fare=fare,
        status=status,
        attendance=attendance,
    )


def test_unlinked_ride_bills_under_its_name():
    bills = build_statement([ride("r1", "Ahmed", 10, 40)], [], JUNE)

    assert len(bills) == 1
    bill = bills[0]
    assert (bill.key, bill.name, bill.phone, bill.total, bill.ride_count) == ("Ahmed", "Ahmed", "", 40, 1)


def test_equal_totals_keep_input_order():
    rides = [
        ride("1", "Noura", 2, 50),
        ride("2", "Khalid", 2, 100),
        ride("3", "Noura", 3, 50),
    ]

    bills = build_statement(rides, [], JUNE)

    assert [b.name for b in bills] == ["Noura", "Khalid"]
    assert [b.total for b in bills] == [100, 100]


def test_sorted_by_total_descending():
    rides = [ride("1", "Small", 2, 10), ride("2", "Big", 2, 90), ride("3", "Mid", 2, 45)]

    assert [b.name for b in build_statement(rides, [], JUNE)] == ["Big", "Mid", "Small"]


def test_absent_rides_are_listed_but_not_charged():
    rides = [
        ride("1", "Sara", 2, 25, pid="p1"),
        ride("2", "Sara", 3, 25, pid="p1", attendance=Attendance.ABSENT),
    ]

    bill = build_statement(rides, [], JUNE)[0]

    assert bill.total == 25
    assert bill.ride_count == 2
    assert [(d.date, d.attendance) for d in bill.details] == [
        (date(2025, 6, 2), Attendance.PRESENT),
        (date(2025, 6, 3), Attendance.ABSENT),
    ]
    assert bill.details[1].fare == 25
    assert bill.present_count == 1
    assert [d.date.day for d in bill.absent_lines] == [3]


def test_linked_rides_group_by_id_and_resolve_phone():
    sara = Passenger(passenger_id="p1", name="Sara A.", phone="+966 50 000 0001", is_regular=True)
    rides = [
        ride("1", "Sara", 2, 25, pid="p1"),
        ride("2", "Sara (renamed)", 3, 25, pid="p1"),
        ride("3", "Sara", 4, 25),
    ]

    bills = build_statement(rides, [sara], JUNE)

    by_key = {b.key: b for b in bills}
    assert by_key["p1"].ride_count == 2
    assert by_key["p1"].name == "Sara"
    assert by_key["p1"].phone == "+966 50 000 0001"
    assert by_key["Sara"].phone == ""


def test_deleted_passenger_still_bills_with_empty_phone():
    bill = build_statement([ride("1", "Omar", 5, 30, pid="gone")], [], JUNE)[0]

    assert (bill.key, bill.name, bill.phone, bill.total) == ("gone", "Omar", "", 30)


def test_only_completed_rides_in_month_are_billed():
    rides = [
        ride("1", "A", 5, 10),
        ride("2", "A", 6, 10, status=RideStatus.SCHEDULED),
        ride("3", "A", 7, 10, status=RideStatus.CANCELLED),
        ride("4", "A", 8, 10, status=RideStatus.SCHEDULED, attendance=Attendance.ABSENT),
        Ride("5", "A", "Home", "Office", datetime(2025, 7, 1, 0, 0), 10, RideStatus.COMPLETED),
    ]

    bills = build_statement(rides, [], JUNE)

    assert len(bills) == 1
    assert bills[0].ride_count == 1


def test_every_completed_ride_appears_exactly_once():
    rides = [
        ride("1", "A", 1, 10),
        ride("2", "B", 1, 20, pid="b"),
        ride("3", "A", 2, 10, attendance=Attendance.ABSENT),
        ride("4", "C", 3, "bad fare"),
        ride("5", "B", 30, 20, pid="b"),
    ]

    bills = build_statement(rides, [], JUNE)

    assert sum(len(b.details) for b in bills) == 5
    assert sum(b.ride_count for b in bills) == 5


def test_absent_fares_never_reach_totals():
    rides = [ride(str(i), "A", i, 999, attendance=Attendance.ABSENT) for i in range(1, 6)]

    bills = build_statement(rides, [], JUNE)

    assert bills[0].total == 0
    assert summarize(bills).total_earnings == 0


def test_summary():
    rides = [ride("1", "A", 1, "12.50"), ride("2", "B", 1, 20), ride("3", "A", 2, 10)]

    summary = summarize(build_statement(rides, [], JUNE))

    assert summary.total_rides == 3
    assert summary.total_clients == 2
    assert summary.total_earnings == Decimal("42.50")


def test_empty_statement():
    assert build_statement([], [], JUNE) == []
    assert summarize([]).total_earnings == 0


def test_building_twice_gives_identical_statement():
    rides = [ride("1", "A", 1, 10), ride("2", "B", 2, 10, attendance=Attendance.ABSENT)]
    assert build_statement(rides, [], JUNE) == build_statement(rides, [], JUNE)
