from __future__ import annotations

import logging
from contextlib import nullcontext
from datetime import datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..common.validators import require_non_empty
from .factory import LoginStatusStrategyFactory
from .model import Attendance, AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: open and close attendance records around a staff session."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: LoginStatusStrategyFactory | None = None,
        transaction: Callable[[], ContextManager] | None = None,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or LoginStatusStrategyFactory()
        self._transaction = transaction or nullcontext

    def record_login(self, *, user_id: int, store_id: int, now: datetime, face_scan: str) -> Attendance:
        face_scan = require_non_empty(face_scan, "Face scan")
        decision = self._factory.for_login(now=now).decide_login(now=now)

        with self._transaction():
            stale = self._attendance.get_open_for_user(user_id)
            if stale:
                # Previous session ended without a logout (expired or abandoned).
                logger.info("Closing stale attendance %s for user %s", stale.attendance_id, user_id)
                self._close(stale, now=now, face_scan=None)

            return self._attendance.create_login(
                user_id=user_id,
                store_id=store_id,
                login_time=now,
                login_status=decision.status,
                face_scan_login=face_scan,
            )

    def record_logout(self, *, user_id: int, now: datetime, face_scan: Optional[str] = None) -> Optional[Attendance]:
        """Close the user's open record. Returns None when nothing is open."""
        with self._transaction():
            record = self._attendance.get_open_for_user(user_id)
            if not record:
                return None
            return self._close(record, now=now, face_scan=face_scan)

    def _close(self, record: Attendance, *, now: datetime, face_scan: Optional[str]) -> Optional[Attendance]:
        return self._attendance.close(
            attendance_id=record.attendance_id,
            logout_time=now,
            duration=minutes_between(record.login_time, now),
            face_scan_logout=face_scan or None,
        )

    def get_latest(self, user_id: int) -> Optional[Attendance]:
        return self._attendance.get_latest_for_user(user_id)

    def get_open(self, user_id: int) -> Optional[Attendance]:
        return self._attendance.get_open_for_user(user_id)

    def list_all(self) -> Sequence[Attendance]:
        return self._attendance.list_all()

    def list_log(self) -> Sequence[AttendanceView]:
        return self._attendance.list_all_joined()
