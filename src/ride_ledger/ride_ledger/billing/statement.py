from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..common.money import ZERO
from ..core.enums import RideStatus
from ..ledger.selectors import in_month, partition_parseable, select, status_is
from ..ledger.windows import Month
from ..passengers.model import Passenger
from ..rides.model import Ride
from .calculator.base import FareCalculator
from .calculator.standard_calculator import StandardFareCalculator
from .model import BillingSummary, BillLine, ClientBill


def build_statement(
    rides: Iterable[Ride],
    passengers: Iterable[Passenger],
    month: Month,
    calculator: Optional[FareCalculator] = None,
) -> list[ClientBill]:
    """Per-client bills for the completed rides of `month`, highest total first.

    Rides are grouped by passenger id, or by the free-text name when the ride
    has no linked passenger. Every grouped ride is listed in the details, but
    absent ones add nothing to the total. Equal totals keep the order in which
    the clients first appear in `rides`.
    """
    calculator = calculator or StandardFareCalculator()
    phones = {p.passenger_id: p.phone or "" for p in passengers}
    valid, _ = partition_parseable(rides)

    groups: dict[str, list[Ride]] = {}
    for r in select(valid, status_is(RideStatus.COMPLETED), in_month(month)):
        groups.setdefault(r.client_key, []).append(r)

    bills: list[ClientBill] = []
    for key, grouped in groups.items():
        first = grouped[0]
        total: Decimal = sum((calculator.billable_amount(r) for r in grouped), ZERO)
        bills.append(
            ClientBill(
                key=key,
                name=first.passenger_name,
                phone=phones.get(first.passenger_id, "") if first.passenger_id else "",
                ride_count=len(grouped),
                total=total,
                details=tuple(
                    BillLine(date=r.pickup_at.date(), fare=r.amount, attendance=r.attendance) for r in grouped
                ),
            )
        )

    bills.sort(key=lambda b: b.total, reverse=True)
    return bills


def summarize(bills: Sequence[ClientBill]) -> BillingSummary:
    return BillingSummary(
        total_rides=sum(b.ride_count for b in bills),
        total_clients=len(bills),
        total_earnings=sum((b.total for b in bills), ZERO),
    )
