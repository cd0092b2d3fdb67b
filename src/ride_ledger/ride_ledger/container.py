from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .passengers.mysql_passenger_repository import MySQLPassengerRepository
from .passengers.repository import PassengerRepository
from .passengers.service import PassengerService
from .reports.service import LedgerReportService
from .rides.mysql_ride_repository import MySQLRideRepository
from .rides.repository import RideRepository
from .rides.service import RideService


@dataclass(frozen=True)
class Container:
    rides_repo: RideRepository
    passengers_repo: PassengerRepository

    ride_service: RideService
    passenger_service: PassengerService
    report_service: LedgerReportService

    conn: Optional[DatabaseConnection] = None


def wire(rides_repo: RideRepository, passengers_repo: PassengerRepository, *, conn: Optional[DatabaseConnection] = None) -> Container:
    return Container(
        rides_repo=rides_repo,
        passengers_repo=passengers_repo,
        ride_service=RideService(rides_repo, passengers_repo),
        passenger_service=PassengerService(passengers_repo),
        report_service=LedgerReportService(rides_repo, passengers_repo),
        conn=conn,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return wire(MySQLRideRepository(conn), MySQLPassengerRepository(conn), conn=conn)
