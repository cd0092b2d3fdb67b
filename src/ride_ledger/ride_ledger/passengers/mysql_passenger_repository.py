from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_update, db_cursor, fetch_all, fetch_one
from .model import Passenger
from .repository import PassengerRepository

_COLUMNS = """
    passenger_id, name, phone, profession, pickup_location, drop_location,
    school_office_info, is_regular, created_at, updated_at
"""

_UPDATABLE = (
    "name",
    "phone",
    "profession",
    "pickup_location",
    "drop_location",
    "school_office_info",
    "is_regular",
)


def _to_passenger(r: Dict[str, Any]) -> Passenger:
    return Passenger(
        passenger_id=str(r["passenger_id"]),
        name=r["name"],
        phone=r.get("phone") or "",
        profession=r.get("profession"),
        pickup_location=r.get("pickup_location") or "",
        drop_location=r.get("drop_location") or "",
        school_office_info=r.get("school_office_info"),
        is_regular=bool(r.get("is_regular")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLPassengerRepository(PassengerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Passenger]:
        with db_cursor(self._conn_factory, commit=False) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM passengers ORDER BY name")
            return fetch_all(cur, _to_passenger)

    def get_by_id(self, passenger_id: str) -> Optional[Passenger]:
        with db_cursor(self._conn_factory, commit=False) as cur:
            cur.execute(f"SELECT {_COLUMNS} FROM passengers WHERE passenger_id=%s", (passenger_id,))
            return fetch_one(cur, _to_passenger)

    def create(self, passenger: Passenger) -> Passenger:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                """
                INSERT INTO passengers (
                    passenger_id, name, phone, profession, pickup_location, drop_location,
                    school_office_info, is_regular
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    passenger.passenger_id,
                    passenger.name,
                    passenger.phone,
                    passenger.profession,
                    passenger.pickup_location,
                    passenger.drop_location,
                    passenger.school_office_info,
                    1 if passenger.is_regular else 0,
                ),
            )
        return self.get_by_id(passenger.passenger_id) or passenger

    def update(self, passenger_id: str, **fields: Any) -> Optional[Passenger]:
        if "is_regular" in fields:
            fields["is_regular"] = 1 if fields["is_regular"] else 0
        sql, params = build_update("passengers", "passenger_id", passenger_id, fields, _UPDATABLE)
        with db_cursor(self._conn_factory) as cur:
            cur.execute(sql, params)
        return self.get_by_id(passenger_id)

    def delete(self, passenger_id: str) -> bool:
        with db_cursor(self._conn_factory) as cur:
            cur.execute("DELETE FROM passengers WHERE passenger_id=%s", (passenger_id,))
            return cur.rowcount > 0
