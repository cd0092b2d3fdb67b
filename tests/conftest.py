from __future__ import annotations

import dataclasses
import itertools
from datetime import datetime
from typing import Any, Optional

import pytest

from src.ride_ledger.ride_ledger.passengers.model import Passenger
from src.ride_ledger.ride_ledger.rides.model import Ride


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday; the week runs Sunday 11 May .. Saturday 17 May
    return datetime(2025, 5, 14, 10, 30)


class InMemoryRides:
    def __init__(self, rides=()):
        self._by_id: dict[str, Ride] = {r.ride_id: r for r in rides}

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, ride_id: str) -> Optional[Ride]:
        return self._by_id.get(ride_id)

    def create(self, ride: Ride) -> Ride:
        self._by_id[ride.ride_id] = ride
        return ride

    def update(self, ride_id: str, **fields: Any) -> Optional[Ride]:
        ride = self._by_id.get(ride_id)
        if not ride:
            return None
        self._by_id[ride_id] = dataclasses.replace(ride, **fields)
        return self._by_id[ride_id]

    def delete(self, ride_id: str) -> bool:
        return self._by_id.pop(ride_id, None) is not None


class InMemoryPassengers:
    def __init__(self, passengers=()):
        self._by_id: dict[str, Passenger] = {p.passenger_id: p for p in passengers}

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda p: p.name)

    def get_by_id(self, passenger_id: str) -> Optional[Passenger]:
        return self._by_id.get(passenger_id)

    def create(self, passenger: Passenger) -> Passenger:
        self._by_id[passenger.passenger_id] = passenger
        return passenger

    def update(self, passenger_id: str, **fields: Any) -> Optional[Passenger]:
        passenger = self._by_id.get(passenger_id)
        if not passenger:
            return None
        self._by_id[passenger_id] = dataclasses.replace(passenger, **fields)
        return self._by_id[passenger_id]

    def delete(self, passenger_id: str) -> bool:
        return self._by_id.pop(passenger_id, None) is not None


@pytest.fixture
def rides_repo() -> InMemoryRides:
    return InMemoryRides()


@pytest.fixture
def passengers_repo() -> InMemoryPassengers:
    return InMemoryPassengers(
        [
            Passenger(
                passenger_id="p-sara",
                name="Sara",
                phone="+966500000001",
                pickup_location="Al Olaya",
                drop_location="KSU",
                is_regular=True,
            ),
            Passenger(passenger_id="p-layla", name="Layla", phone="+966500000003", is_regular=False),
        ]
    )


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"
