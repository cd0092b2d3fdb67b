"""Example: use the pure ledger functions directly (no Flask, no database)."""

from datetime import datetime

from src.ride_ledger.ride_ledger.attendance.grid import build_grid
from src.ride_ledger.ride_ledger.billing.export import bill_message
from src.ride_ledger.ride_ledger.billing.statement import build_statement
from src.ride_ledger.ride_ledger.core.enums import Attendance, RideStatus
from src.ride_ledger.ride_ledger.ledger.earnings import earnings
from src.ride_ledger.ride_ledger.ledger.windows import Month
from src.ride_ledger.ride_ledger.passengers.model import Passenger
from src.ride_ledger.ride_ledger.rides.model import Ride


def main():
    now = datetime(2025, 5, 14, 18, 0)
    sara = Passenger(passenger_id="p1", name="Sara", phone="+966500000001", is_regular=True)
    rides = [
        Ride("r1", "Sara", "Home", "School", datetime(2025, 5, 14, 7, 0), 25, RideStatus.COMPLETED, passenger_id="p1"),
        Ride("r2", "Sara", "Home", "School", datetime(2025, 5, 13, 7, 0), 25, RideStatus.SCHEDULED, Attendance.ABSENT, passenger_id="p1"),
        Ride("r3", "Ahmed", "Airport", "Hotel", datetime(2025, 5, 12, 21, 0), 40, RideStatus.COMPLETED),
    ]

    month = Month.of(now)
    print(earnings(rides, now))
    print(build_grid([sara], rides, month).totals)
    for bill in build_statement(rides, [sara], month):
        print(bill_message(bill, month))


if __name__ == "__main__":
    main()
