from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat
from ..core.enums import LoginStatus
from ..stores.model import Store
from ..users.model import User


@dataclass(frozen=True)
class Attendance:
    """Domain entity: one login/logout cycle of a staff member at a store."""

    attendance_id: int
    user_id: int
    store_id: int
    login_time: datetime
    login_status: LoginStatus
    face_scan_login: str
    logout_time: Optional[datetime] = None
    duration: Optional[int] = None
    face_scan_logout: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.logout_time is None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "userId": self.user_id,
            "storeId": self.store_id,
            "loginTime": isoformat(self.login_time),
            "loginStatus": self.login_status.value,
            "logoutTime": isoformat(self.logout_time),
            "duration": self.duration,
            "faceScanLogin": self.face_scan_login,
            "faceScanLogout": self.face_scan_logout,
        }


@dataclass(frozen=True)
class AttendanceView:
    """Read-model for the admin attendance log (attendance joined with user and store)."""

    attendance: Attendance
    user: User
    store: Store

    def to_dict(self) -> dict:
        out = self.attendance.to_dict()
        out["user"] = self.user.to_dict()
        out["store"] = self.store.to_dict()
        return out
