from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Ride


class RideRepository(Protocol):
    def list_all(self) -> Sequence[Ride]:
        """All rides, most recent pickup first."""

        raise NotImplementedError

    def get_by_id(self, ride_id: str) -> Optional[Ride]:
        raise NotImplementedError

    def create(self, ride: Ride) -> Ride:
        raise NotImplementedError

    def update(self, ride_id: str, **fields: Any) -> Optional[Ride]:
        """Apply column changes; returns the stored ride or None if it does not exist."""

        raise NotImplementedError

    def delete(self, ride_id: str) -> bool:
        raise NotImplementedError
