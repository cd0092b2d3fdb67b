from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..core.enums import CellState
from ..ledger.windows import Month
from ..passengers.model import Passenger


@dataclass(frozen=True)
class GridCell:
    day: date
    state: CellState


@dataclass(frozen=True)
class GridRow:
    """One regular passenger across every day of the month."""

    passenger: Passenger
    cells: tuple[GridCell, ...]
    present_count: int
    absent_count: int
    earnings: Decimal


@dataclass(frozen=True)
class GridTotals:
    present_count: int
    absent_count: int
    earnings: Decimal


@dataclass(frozen=True)
class AttendanceGrid:
    month: Month
    rows: tuple[GridRow, ...]
    totals: GridTotals
    skipped: int = 0

    @property
    def days(self) -> list[date]:
        return self.month.days()
