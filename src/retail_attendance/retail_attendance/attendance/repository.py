from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LoginStatus
from .model import Attendance, AttendanceView


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def create_login(
        self,
        *,
        user_id: int,
        store_id: int,
        login_time: datetime,
        login_status: LoginStatus,
        face_scan_login: str,
    ) -> Attendance:
        """Open a record. Refuses when the user already has an open one."""

        raise NotImplementedError

    def close(
        self,
        *,
        attendance_id: int,
        logout_time: datetime,
        duration: int,
        face_scan_logout: Optional[str] = None,
    ) -> Optional[Attendance]:
        raise NotImplementedError

    def get_open_for_user(self, user_id: int) -> Optional[Attendance]:
        raise NotImplementedError

    def get_latest_for_user(self, user_id: int) -> Optional[Attendance]:
        """Record with the greatest login time, open or closed."""

        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_for_store(self, store_id: int) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Attendance]:
        raise NotImplementedError

    def list_all_joined(self) -> Sequence[AttendanceView]:
        raise NotImplementedError
