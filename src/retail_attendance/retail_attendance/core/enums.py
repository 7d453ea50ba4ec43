from __future__ import annotations

from enum import Enum


class LoginStatus(str, Enum):
    """Login punctuality, fixed when the attendance record is created."""

    EARLY = "early"
    ONTIME = "ontime"
    LATE = "late"


class StockStatus(str, Enum):
    """Health of one inventory line after reconciliation."""

    GOOD = "Good"
    LOW = "Low"
    VERY_LOW = "VeryLow"
    UNKNOWN = "Unknown"


class LoginFailure(str, Enum):
    """Distinct reasons a staff login is refused, in evaluation order."""

    UNKNOWN_PHONE = "unknown_phone"
    STORE_MISMATCH = "store_mismatch"
    STORE_NOT_FOUND = "store_not_found"
    OUTSIDE_GEOFENCE = "outside_geofence"
    INVALID_CREDENTIALS = "invalid_credentials"
