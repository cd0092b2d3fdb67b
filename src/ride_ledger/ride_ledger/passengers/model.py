from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Passenger:
    """Domain entity: a client profile reused across rides.

    `is_regular` separates recurring clients (tracked in the attendance grid)
    from one-time clients (billed only).
    """

    passenger_id: str
    name: str
    phone: str
    pickup_location: str = ""
    drop_location: str = ""
    profession: Optional[str] = None
    school_office_info: Optional[str] = None
    is_regular: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewPassenger:
    name: str
    phone: str
    pickup_location: str = ""
    drop_location: str = ""
    profession: Optional[str] = None
    school_office_info: Optional[str] = None
    is_regular: bool = False
