from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import Attendance
from ..ledger.windows import Month


@dataclass(frozen=True)
class BillLine:
    """One completed ride on a client's statement (absent days included)."""

    date: date
    fare: Decimal
    attendance: Attendance


@dataclass(frozen=True)
class ClientBill:
    key: str
    name: str
    phone: str
    ride_count: int
    total: Decimal
    details: tuple[BillLine, ...]

    @property
    def present_lines(self) -> list[BillLine]:
        return [d for d in self.details if d.attendance != Attendance.ABSENT]

    @property
    def absent_lines(self) -> list[BillLine]:
        return [d for d in self.details if d.attendance == Attendance.ABSENT]

    @property
    def present_count(self) -> int:
        return len(self.present_lines)


@dataclass(frozen=True)
class BillingSummary:
    total_rides: int
    total_clients: int
    total_earnings: Decimal


@dataclass(frozen=True)
class BillingReport:
    """Read-model for the monthly billing page and its exports."""

    month: Month
    bills: tuple[ClientBill, ...]
    summary: BillingSummary
    skipped: int = 0
