from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from src.ride_ledger.ride_ledger.billing.calculator.base import FareCalculator
from src.ride_ledger.ride_ledger.core.enums import Attendance, RideStatus
from src.ride_ledger.ride_ledger.ledger.windows import Month
from src.ride_ledger.ride_ledger.reports.service import LedgerReportService
from src.ride_ledger.ride_ledger.rides.model import Ride

MAY = Month(2025, 5)


def seed(rides_repo):
    rides = [
        Ride("r1", "Sara", "Home", "KSU", datetime(2025, 5, 12, 7, 0), 25, RideStatus.COMPLETED, passenger_id="p-sara"),
        Ride(
            "r2", "Sara", "Home", "KSU", datetime(2025, 5, 13, 7, 0), 25, RideStatus.SCHEDULED,
            attendance=Attendance.ABSENT, passenger_id="p-sara",
        ),
        Ride("r3", "Ahmed", "Airport", "Hotel", datetime(2025, 5, 14, 9, 0), 40, RideStatus.COMPLETED),
        Ride("r4", "Ahmed", "Airport", "Hotel", "not a date", 40, RideStatus.COMPLETED),
    ]
    for r in rides:
        rides_repo.create(r)


def test_earnings_snapshot(rides_repo, passengers_repo, fixed_now):
    seed(rides_repo)
    svc = LedgerReportService(rides_repo, passengers_repo)

    snap = svc.earnings(now=fixed_now)

    assert snap.today == 40
    assert snap.week == 65
    assert snap.month == 65
    assert snap.skipped == 1


def test_attendance_grid_covers_regular_passengers(rides_repo, passengers_repo):
    seed(rides_repo)
    grid = LedgerReportService(rides_repo, passengers_repo).attendance_grid(MAY)

    assert [row.passenger.name for row in grid.rows] == ["Sara"]
    row = grid.rows[0]
    assert (row.present_count, row.absent_count, row.earnings) == (1, 1, 25)


def test_billing_report_and_client_bill(rides_repo, passengers_repo):
    seed(rides_repo)
    svc = LedgerReportService(rides_repo, passengers_repo)

    report = svc.billing_report(MAY)

    assert [b.key for b in report.bills] == ["Ahmed", "p-sara"]
    assert report.summary.total_earnings == 65
    assert report.skipped == 1
    assert svc.client_bill(MAY, "p-sara").phone == "+966500000001"
    assert svc.client_bill(MAY, "nobody") is None


class FlatFare(FareCalculator):
    def billable_amount(self, ride):
        return Decimal("0") if ride.is_absent else Decimal("10")


def test_custom_calculator_is_used_everywhere(rides_repo, passengers_repo, fixed_now):
    seed(rides_repo)
    svc = LedgerReportService(rides_repo, passengers_repo, calculator=FlatFare())

    assert svc.earnings(now=fixed_now).month == 20
    assert svc.billing_report(MAY).summary.total_earnings == 20
    assert svc.attendance_grid(MAY).rows[0].earnings == 10
