from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..billing.calculator.base import FareCalculator
from ..billing.calculator.standard_calculator import StandardFareCalculator
from ..common.money import ZERO
from ..core.enums import CellState
from ..ledger.selectors import in_month, partition_parseable, select
from ..ledger.windows import Month
from ..passengers.model import Passenger
from ..rides.model import Ride
from .model import AttendanceGrid, GridCell, GridRow, GridTotals


def cell_state(ride: Ride) -> CellState:
    """What a single ride says about its day.

    An absent marker counts whatever the status, since it is set before (and
    instead of) completion. Present only counts once the ride is completed.
    """
    if ride.is_absent:
        return CellState.ABSENT
    if ride.is_completed:
        return CellState.PRESENT
    return CellState.NONE


def _day_states(rides: Iterable[Ride]) -> dict[date, CellState]:
    # First deciding ride in input order wins when a day has duplicates.
    states: dict[date, CellState] = {}
    for r in rides:
        state = cell_state(r)
        if state == CellState.NONE:
            continue
        states.setdefault(r.pickup_at.date(), state)
    return states


def build_grid(
    passengers: Iterable[Passenger],
    rides: Iterable[Ride],
    month: Month,
    calculator: Optional[FareCalculator] = None,
) -> AttendanceGrid:
    """Day-by-client attendance matrix for the regular passengers of `month`."""
    calculator = calculator or StandardFareCalculator()
    valid, skipped = partition_parseable(rides)
    month_rides = select(valid, in_month(month))

    by_passenger: dict[str, list[Ride]] = {}
    for r in month_rides:
        if r.passenger_id:
            by_passenger.setdefault(r.passenger_id, []).append(r)

    days = month.days()
    rows: list[GridRow] = []
    for p in passengers:
        if not p.is_regular:
            continue

        own = by_passenger.get(p.passenger_id, [])
        states = _day_states(own)
        cells = tuple(GridCell(day=d, state=states.get(d, CellState.NONE)) for d in days)
        earned: Decimal = sum(
            (calculator.billable_amount(r) for r in own if cell_state(r) == CellState.PRESENT),
            ZERO,
        )
        rows.append(
            GridRow(
                passenger=p,
                cells=cells,
                present_count=sum(1 for c in cells if c.state == CellState.PRESENT),
                absent_count=sum(1 for c in cells if c.state == CellState.ABSENT),
                earnings=earned,
            )
        )

    totals = GridTotals(
        present_count=sum(r.present_count for r in rows),
        absent_count=sum(r.absent_count for r in rows),
        earnings=sum((r.earnings for r in rows), ZERO),
    )
    return AttendanceGrid(month=month, rows=tuple(rows), totals=totals, skipped=skipped)
