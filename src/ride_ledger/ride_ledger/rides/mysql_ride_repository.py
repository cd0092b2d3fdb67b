from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import Attendance, RideStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetch_all, fetch_one
from .model import Ride
from .repository import RideRepository

_COLUMNS = """
    ride_id, passenger_id, passenger_name, pickup_location, drop_location,
    pickup_time, drop_time, fare, status, attendance, notes, created_at, updated_at
"""

_UPDATABLE = (
    "passenger_id",
    "passenger_name",
    "pickup_location",
    "drop_location",
    "pickup_time",
    "drop_time",
    "fare",
    "status",
    "attendance",
    "notes",
)


def _to_ride(r: Dict[str, Any]) -> Ride:
    return Ride(
        ride_id=str(r["ride_id"]),
        passenger_id=str(r["passenger_id"]) if r.get("passenger_id") else None,
        passenger_name=r["passenger_name"],
        pickup_location=r.get("pickup_location") or "",
        drop_location=r.get("drop_location") or "",
        pickup_time=r["pickup_time"],
        drop_time=r.get("drop_time"),
        fare=r.get("fare"),
        status=RideStatus(r["status"]),
        attendance=Attendance(r.get("attendance") or Attendance.PRESENT.value),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _db_value(value: Any) -> Any:
    if isinstance(value, (RideStatus, Attendance)):
        return value.value
    return value


class MySQLRideRepository(RideRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Ride]:
        with db_cursor(self._conn_factory, commit=False) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM rides ORDER BY pickup_time DESC")
            return fetch_all(cur, _to_ride)

    def get_by_id(self, ride_id: str) -> Optional[Ride]:
        with db_cursor(self._conn_factory, commit=False) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM rides WHERE ride_id=%s", (ride_id,))
            return fetch_one(cur, _to_ride)

    def create(self, ride: Ride) -> Ride:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO rides (
                    ride_id, passenger_id, passenger_name, pickup_location, drop_location,
                    pickup_time, fare, status, attendance, notes
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    ride.ride_id,
                    ride.passenger_id,
                    ride.passenger_name,
                    ride.pickup_location,
                    ride.drop_location,
                    ride.pickup_at,
                    ride.amount,
                    ride.status.value,
                    ride.attendance.value,
                    ride.notes,
                ),
            )
        return self.get_by_id(ride.ride_id) or ride

    def update(self, ride_id: str, **fields: Any) -> Optional[Ride]:
        sql, params = build_update("rides", "ride_id", ride_id, {k: _db_value(v) for k, v in fields.items()}, _UPDATABLE)
        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, params)
        return self.get_by_id(ride_id)

    def delete(self, ride_id: str) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM rides WHERE ride_id=%s", (ride_id,))
            return cur.rowcount > 0
