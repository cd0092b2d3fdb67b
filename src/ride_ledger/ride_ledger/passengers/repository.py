from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Passenger


class PassengerRepository(Protocol):
    def list_all(self) -> Sequence[Passenger]:
        """All passengers ordered by name."""

        raise NotImplementedError

    def get_by_id(self, passenger_id: str) -> Optional[Passenger]:
        raise NotImplementedError

    def create(self, passenger: Passenger) -> Passenger:
        raise NotImplementedError

    def update(self, passenger_id: str, **fields: Any) -> Optional[Passenger]:
        raise NotImplementedError

    def delete(self, passenger_id: str) -> bool:
        raise NotImplementedError
