from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..attendance.grid import build_grid
from ..attendance.model import AttendanceGrid
from ..billing.calculator.base import FareCalculator
from ..billing.calculator.standard_calculator import StandardFareCalculator
from ..billing.model import BillingReport, ClientBill
from ..billing.statement import build_statement, summarize
from ..common.datetime_utils import now_local
from ..ledger.earnings import EarningsSnapshot, earnings
from ..ledger.windows import Month
from ..passengers.repository import PassengerRepository
from ..rides.repository import RideRepository


class LedgerReportService:
    """Reads one snapshot from the repositories and hands it to the pure builders."""

    def __init__(
        self,
        rides: RideRepository,
        passengers: PassengerRepository,
        *,
        calculator: Optional[FareCalculator] = None,
    ):
        self._rides = rides
        self._passengers = passengers
        self._calculator = calculator or StandardFareCalculator()

    def earnings(self, *, now: datetime | None = None) -> EarningsSnapshot:
        return earnings(self._rides.list_all(), now or now_local(), self._calculator)

    def attendance_grid(self, month: Month) -> AttendanceGrid:
        return build_grid(self._passengers.list_all(), self._rides.list_all(), month, self._calculator)

    def billing_report(self, month: Month) -> BillingReport:
        rides = list(self._rides.list_all())
        bills = build_statement(rides, self._passengers.list_all(), month, self._calculator)
        skipped = sum(1 for r in rides if r.pickup_at is None)
        return BillingReport(month=month, bills=tuple(bills), summary=summarize(bills), skipped=skipped)

    def client_bill(self, month: Month, client_key: str) -> Optional[ClientBill]:
        for bill in self.billing_report(month).bills:
            if bill.key == client_key:
                return bill
        return None
