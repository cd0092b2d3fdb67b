from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local, parse_instant
from ..common.validators import optional_text, require_fare, require_non_empty, text
from ..core.enums import Attendance, RideStatus
from ..core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from ..passengers.repository import PassengerRepository
from .model import NewRide, Ride
from .repository import RideRepository

logger = logging.getLogger(__name__)

OPEN_STATUSES = (RideStatus.SCHEDULED, RideStatus.IN_PROGRESS)
EDITABLE_FIELDS = ("passenger_id", "passenger_name", "pickup_location", "drop_location", "pickup_time", "fare", "notes")


class RideService:
    """Ride lifecycle: schedule, mark attendance, start, complete, cancel, delete.

    Completion and presence are coupled: a ride marked absent can no longer be
    completed, and attendance can only change while the ride is still open.
    """

    def __init__(
        self,
        rides: RideRepository,
        passengers: PassengerRepository,
        *,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._rides = rides
        self._passengers = passengers
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_rides(self) -> list[Ride]:
        return list(self._rides.list_all())

    def get_ride(self, ride_id: str) -> Ride:
        ride = self._rides.get_by_id(ride_id)
        if not ride:
            raise NotFoundError("Ride not found")
        return ride

    @staticmethod
    def _parse_pickup(value: Any) -> datetime:
        pickup = parse_instant(value)
        if pickup is None:
            raise ValidationError("Pickup time is not a valid date/time")
        return pickup

    def add_ride(self, new: NewRide, *, now: datetime | None = None) -> Ride:
        now = now or now_local()

        name = text(new.passenger_name, "Passenger name")
        pickup_location = text(new.pickup_location, "Pickup location")
        drop_location = text(new.drop_location, "Drop location")

        passenger_id = optional_text(new.passenger_id)
        if passenger_id:
            passenger = self._passengers.get_by_id(passenger_id)
            if not passenger:
                raise ValidationError("Passenger does not exist")
            name = name or passenger.name
            pickup_location = pickup_location or passenger.pickup_location
            drop_location = drop_location or passenger.drop_location

        ride = Ride(
            ride_id=self._new_id(),
            passenger_id=passenger_id,
            passenger_name=require_non_empty(name, "Passenger name"),
            pickup_location=pickup_location,
            drop_location=drop_location,
            pickup_time=self._parse_pickup(new.pickup_time),
            fare=require_fare(0 if new.fare in (None, "") else new.fare),
            notes=optional_text(new.notes),
            created_at=now,
            updated_at=now,
        )
        created = self._rides.create(ride)
        logger.info("Scheduled ride %s for %s at %s", created.ride_id, created.passenger_name, created.pickup_time)
        return created

    def update_ride(self, ride_id: str, **changes: Any) -> Ride:
        """Edit ride details; status and attendance go through the lifecycle methods."""
        self.get_ride(ride_id)

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")

        fields: dict[str, Any] = {}
        for key, value in changes.items():
            if key == "passenger_name":
                fields[key] = require_non_empty(value, "Passenger name")
            elif key == "pickup_time":
                fields[key] = self._parse_pickup(value)
            elif key == "fare":
                fields[key] = require_fare(value)
            elif key == "passenger_id":
                passenger_id = optional_text(value)
                if passenger_id and not self._passengers.get_by_id(passenger_id):
                    raise ValidationError("Passenger does not exist")
                fields[key] = passenger_id
            elif key == "notes":
                fields[key] = optional_text(value)
            else:
                fields[key] = text(value, key)

        if not fields:
            raise ValidationError("Nothing to update")
        return self._save(ride_id, **fields)

    def mark_attendance(self, ride_id: str, attendance: Attendance | str) -> Ride:
        try:
            attendance = Attendance(attendance)
        except ValueError:
            raise ValidationError("Attendance must be 'present' or 'absent'")

        ride = self.get_ride(ride_id)
        if ride.status not in OPEN_STATUSES:
            raise InvalidTransitionError(f"Cannot change attendance of a {ride.status.value} ride")

        updated = self._save(ride_id, attendance=attendance)
        logger.info("Ride %s marked %s", ride_id, attendance.value)
        return updated

    def start_ride(self, ride_id: str) -> Ride:
        ride = self.get_ride(ride_id)
        if ride.status != RideStatus.SCHEDULED:
            raise InvalidTransitionError(f"Cannot start a {ride.status.value} ride")
        if ride.is_absent:
            raise InvalidTransitionError("Cannot start a ride marked absent")
        return self._save(ride_id, status=RideStatus.IN_PROGRESS)

    def complete_ride(self, ride_id: str, fare: Any = 0, *, now: datetime | None = None) -> Ride:
        now = now or now_local()
        amount = require_fare(fare)

        ride = self.get_ride(ride_id)
        if ride.status not in OPEN_STATUSES:
            raise InvalidTransitionError(f"Cannot complete a {ride.status.value} ride")
        if ride.is_absent:
            raise InvalidTransitionError("Cannot complete a ride marked absent")

        updated = self._save(ride_id, status=RideStatus.COMPLETED, drop_time=now, fare=amount)
        logger.info("Ride %s completed, fare %s", ride_id, amount)
        return updated

    def cancel_ride(self, ride_id: str) -> Ride:
        ride = self.get_ride(ride_id)
        if ride.status not in OPEN_STATUSES:
            raise InvalidTransitionError(f"Cannot cancel a {ride.status.value} ride")
        updated = self._save(ride_id, status=RideStatus.CANCELLED)
        logger.info("Ride %s cancelled", ride_id)
        return updated

    def delete_ride(self, ride_id: str) -> None:
        if not self._rides.delete(ride_id):
            raise NotFoundError("Ride not found")
        logger.info("Ride %s deleted", ride_id)

    def _save(self, ride_id: str, **fields: Any) -> Ride:
        updated = self._rides.update(ride_id, **fields)
        if not updated:
            raise NotFoundError("Ride not found")
        return updated
