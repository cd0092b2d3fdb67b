from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import parse_instant
from ..common.money import to_amount
from ..core.enums import Attendance, RideStatus


@dataclass(frozen=True)
class Ride:
    """Domain entity: one scheduled or completed pickup.

    `pickup_time` and `fare` hold the values as stored; use `pickup_at` and
    `amount` to read them. `passenger_name` is a snapshot taken when the ride
    was created and is not synced with later passenger renames.
    """

    ride_id: str
    passenger_name: str
    pickup_location: str
    drop_location: str
    pickup_time: Any
    fare: Any = 0
    status: RideStatus = RideStatus.SCHEDULED
    attendance: Attendance = Attendance.PRESENT
    passenger_id: Optional[str] = None
    drop_time: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def pickup_at(self) -> Optional[datetime]:
        return parse_instant(self.pickup_time)

    @property
    def amount(self) -> Decimal:
        return to_amount(self.fare)

    @property
    def client_key(self) -> str:
        """Billing identity: passenger id when linked, otherwise the free-text name."""
        return self.passenger_id or self.passenger_name

    @property
    def is_completed(self) -> bool:
        return self.status == RideStatus.COMPLETED

    @property
    def is_absent(self) -> bool:
        return self.attendance == Attendance.ABSENT


@dataclass(frozen=True)
class NewRide:
    """Input for creating a ride; blank fields default from the passenger profile."""

    pickup_time: Any
    passenger_name: str = ""
    pickup_location: str = ""
    drop_location: str = ""
    passenger_id: Optional[str] = None
    fare: Any = 0
    notes: Optional[str] = None
