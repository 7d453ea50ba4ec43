from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import LoginStatus
from ..core.exceptions import ConflictError
from ..database.memory import MemoryDatabase
from .model import Attendance, AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db
        # user_id -> attendance_id of the single open record
        self._open_by_user: dict[int, int] = {}

    def _rows(self) -> list[Attendance]:
        return sorted(self._db.table("attendance").values(), key=lambda a: a.attendance_id)

    def get_by_id(self, attendance_id: int) -> Optional[Attendance]:
        return self._db.table("attendance").get(attendance_id)

    def create_login(
        self,
        *,
        user_id: int,
        store_id: int,
        login_time: datetime,
        login_status: LoginStatus,
        face_scan_login: str,
    ) -> Attendance:
        with self._db.transaction() as db:
            if user_id in self._open_by_user:
                raise ConflictError(f"User {user_id} already has an open attendance record")
            record = Attendance(
                attendance_id=db.next_id("attendance"),
                user_id=user_id,
                store_id=store_id,
                login_time=login_time,
                login_status=login_status,
                face_scan_login=face_scan_login,
            )
            db.table("attendance")[record.attendance_id] = record
            self._open_by_user[user_id] = record.attendance_id
            return record

    def close(
        self,
        *,
        attendance_id: int,
        logout_time: datetime,
        duration: int,
        face_scan_logout: Optional[str] = None,
    ) -> Optional[Attendance]:
        with self._db.transaction() as db:
            record = db.table("attendance").get(attendance_id)
            if not record:
                return None
            if not record.is_open:
                raise ConflictError(f"Attendance {attendance_id} is already closed")
            closed = dataclasses.replace(
                record,
                logout_time=logout_time,
                duration=int(duration),
                face_scan_logout=face_scan_logout,
            )
            db.table("attendance")[attendance_id] = closed
            self._open_by_user.pop(record.user_id, None)
            return closed

    def get_open_for_user(self, user_id: int) -> Optional[Attendance]:
        attendance_id = self._open_by_user.get(user_id)
        if attendance_id is None:
            return None
        return self.get_by_id(attendance_id)

    def get_latest_for_user(self, user_id: int) -> Optional[Attendance]:
        rows = self.list_for_user(user_id)
        if not rows:
            return None
        return max(rows, key=lambda a: (a.login_time, a.attendance_id))

    def list_for_user(self, user_id: int) -> Sequence[Attendance]:
        return [a for a in self._rows() if a.user_id == user_id]

    def list_for_store(self, store_id: int) -> Sequence[Attendance]:
        return [a for a in self._rows() if a.store_id == store_id]

    def list_for_date(self, day: date) -> Sequence[Attendance]:
        return [a for a in self._rows() if a.login_time.date() == day]

    def list_all(self) -> Sequence[Attendance]:
        return self._rows()

    def list_all_joined(self) -> Sequence[AttendanceView]:
        users = self._db.table("users")
        stores = self._db.table("stores")
        out: list[AttendanceView] = []
        for a in self._rows():
            user = users.get(a.user_id)
            store = stores.get(a.store_id)
            if not user or not store:
                logger.warning(
                    "Skipping attendance %s: user %s or store %s not found",
                    a.attendance_id,
                    a.user_id,
                    a.store_id,
                )
                continue
            out.append(AttendanceView(attendance=a, user=user, store=store))
        return out
