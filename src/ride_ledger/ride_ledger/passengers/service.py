from __future__ import annotations

import logging
import uuid
from typing import Any, Callable, Optional

from ..common.validators import optional_text, require_flag, require_non_empty, text
from ..core.exceptions import NotFoundError, ValidationError
from .model import NewPassenger, Passenger
from .repository import PassengerRepository

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "phone", "profession", "pickup_location", "drop_location", "school_office_info", "is_regular")


class PassengerService:
    def __init__(self, passengers: PassengerRepository, *, id_factory: Optional[Callable[[], str]] = None):
        self._passengers = passengers
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def list_passengers(self) -> list[Passenger]:
        return list(self._passengers.list_all())

    def list_regular(self) -> list[Passenger]:
        return [p for p in self.list_passengers() if p.is_regular]

    def list_random(self) -> list[Passenger]:
        return [p for p in self.list_passengers() if not p.is_regular]

    def get_passenger(self, passenger_id: str) -> Passenger:
        passenger = self._passengers.get_by_id(passenger_id)
        if not passenger:
            raise NotFoundError("Passenger not found")
        return passenger

    def add_passenger(self, new: NewPassenger) -> Passenger:
        passenger = Passenger(
            passenger_id=self._new_id(),
            name=require_non_empty(new.name, "Name"),
            phone=require_non_empty(new.phone, "Phone"),
            profession=optional_text(new.profession),
            pickup_location=text(new.pickup_location, "Pickup location"),
            drop_location=text(new.drop_location, "Drop location"),
            school_office_info=optional_text(new.school_office_info),
            is_regular=require_flag(new.is_regular, "is_regular"),
        )
        created = self._passengers.create(passenger)
        logger.info("Added %s passenger %s", "regular" if created.is_regular else "random", created.passenger_id)
        return created

    def update_passenger(self, passenger_id: str, **changes: Any) -> Passenger:
        self.get_passenger(passenger_id)

        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot edit field(s): {', '.join(sorted(unknown))}")

        fields: dict[str, Any] = {}
        for key, value in changes.items():
            if key in ("name", "phone"):
                fields[key] = require_non_empty(value, key.capitalize())
            elif key == "is_regular":
                fields[key] = require_flag(value, key)
            elif key in ("profession", "school_office_info"):
                fields[key] = optional_text(value)
            else:
                fields[key] = text(value, key)

        if not fields:
            raise ValidationError("Nothing to update")

        updated = self._passengers.update(passenger_id, **fields)
        if not updated:
            raise NotFoundError("Passenger not found")
        return updated

    def delete_passenger(self, passenger_id: str) -> None:
        # Existing rides keep their passenger_name snapshot.
        if not self._passengers.delete(passenger_id):
            raise NotFoundError("Passenger not found")
        logger.info("Passenger %s deleted", passenger_id)
