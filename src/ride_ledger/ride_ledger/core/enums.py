from __future__ import annotations

from enum import Enum


class RideStatus(str, Enum):
    """Lifecycle state of a ride as stored in the database."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Attendance(str, Enum):
    """Whether the scheduled pickup actually happened."""

    PRESENT = "present"
    ABSENT = "absent"


class CellState(str, Enum):
    """State of one (passenger, day) cell in the attendance grid."""

    PRESENT = "present"
    ABSENT = "absent"
    NONE = "none"


class RidePeriod(str, Enum):
    """Ride list filter (trailing periods, not calendar windows)."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
