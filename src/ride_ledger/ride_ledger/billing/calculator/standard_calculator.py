from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO
from ...rides.model import Ride
from .base import FareCalculator


class StandardFareCalculator(FareCalculator):
    """Standard rule: the stored fare, forced to 0 when the client was absent."""

    def billable_amount(self, ride: Ride) -> Decimal:
        if ride.is_absent:
            return ZERO
        return ride.amount
