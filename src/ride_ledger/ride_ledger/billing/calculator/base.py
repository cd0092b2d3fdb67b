from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...rides.model import Ride


class FareCalculator(ABC):
    """Calculator interface (Strategy Pattern for billing)."""

    @abstractmethod
    def billable_amount(self, ride: Ride) -> Decimal:
        raise NotImplementedError
