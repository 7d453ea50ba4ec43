from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, ContextManager, Optional, Sequence

from ..attendance.model import Attendance
from ..attendance.service import AttendanceService
from ..common.validators import require_non_empty
from ..core.enums import LoginFailure, LoginStatus
from ..core.exceptions import (
    LoginAuthenticationError,
    LoginAuthorizationError,
    LoginNotFoundError,
    NotFoundError,
)
from ..geo.geofence import Geofence
from ..inventory.model import InventoryRow
from ..inventory.service import InventoryService
from ..sessions.model import SessionRecord
from ..sessions.store import SessionStore
from ..stores.model import Store
from ..stores.repository import StoreRepository
from ..targets.model import Target
from ..targets.service import TargetService
from .model import User
from .passwords import PasswordVerifier, WerkzeugPasswordVerifier
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaffLogin:
    """Everything produced by a successful staff check-in."""

    user: User
    store: Store
    attendance: Attendance
    target: Target
    inventory: Sequence[InventoryRow]
    session: SessionRecord
    token: str

    @property
    def login_status(self) -> LoginStatus:
        return self.attendance.login_status


@dataclass(frozen=True)
class AdminLogin:
    user: User
    session: SessionRecord
    token: str


@dataclass(frozen=True)
class CurrentUser:
    user: User
    store: Store
    attendance: Optional[Attendance]
    target: Optional[Target]


class AuthService:
    """Use case: staff check-in / admin login / logout.

    Staff login checks run in a fixed order and stop at the first failure:
    phone known, home store matches, store exists, user inside the geofence.
    """

    def __init__(
        self,
        users: UserRepository,
        stores: StoreRepository,
        attendance: AttendanceService,
        targets: TargetService,
        inventory: InventoryService,
        sessions: SessionStore,
        *,
        geofence: Geofence,
        passwords: Optional[PasswordVerifier] = None,
        transaction: Callable[[], ContextManager] | None = None,
    ):
        self._users = users
        self._stores = stores
        self._attendance = attendance
        self._targets = targets
        self._inventory = inventory
        self._sessions = sessions
        self._geofence = geofence
        self._passwords = passwords or WerkzeugPasswordVerifier()
        self._transaction = transaction or nullcontext

    def check_staff_eligibility(
        self, *, phone: str, store_id: int, latitude: float, longitude: float
    ) -> tuple[User, Store]:
        user = self._users.get_by_phone(phone)
        if not user:
            raise LoginAuthenticationError(LoginFailure.UNKNOWN_PHONE, "User not found with this phone number")

        if user.store_id != store_id:
            raise LoginAuthorizationError(LoginFailure.STORE_MISMATCH, "You are not authorized to access this store")

        store = self._stores.get_by_id(store_id)
        if not store:
            raise LoginNotFoundError(LoginFailure.STORE_NOT_FOUND, "Store not found")

        if not self._geofence.is_at_store(store.coordinates, latitude, longitude):
            raise LoginAuthorizationError(
                LoginFailure.OUTSIDE_GEOFENCE, "You must be at the store location to login"
            )
        return user, store

    def staff_login(
        self,
        *,
        phone: str,
        store_id: int,
        latitude: float,
        longitude: float,
        face_scan: str,
        now: datetime,
    ) -> StaffLogin:
        face_scan = require_non_empty(face_scan, "Face scan")
        user, store = self.check_staff_eligibility(
            phone=phone, store_id=store_id, latitude=latitude, longitude=longitude
        )

        with self._transaction():
            attendance = self._attendance.record_login(
                user_id=user.user_id, store_id=user.store_id, now=now, face_scan=face_scan
            )
            target = self._targets.get_or_create_for_day(user, now.date())
            record, token = self._sessions.create(user, is_admin=False, now=now)

        logger.info("Staff %s logged in at store %s (%s)", user.user_id, store.store_id, attendance.login_status.value)
        return StaffLogin(
            user=user,
            store=store,
            attendance=attendance,
            target=target,
            inventory=self._inventory.list_for_store(user.store_id),
            session=record,
            token=token,
        )

    def admin_login(self, *, phone: str, password: str, now: datetime) -> AdminLogin:
        user = self._users.get_by_phone(phone)
        if not user or not user.is_admin:
            raise LoginAuthenticationError(LoginFailure.INVALID_CREDENTIALS, "Invalid credentials")
        if not self._passwords.verify(user.password_hash, password):
            raise LoginAuthenticationError(LoginFailure.INVALID_CREDENTIALS, "Invalid credentials")

        record, token = self._sessions.create(user, is_admin=True, now=now)
        logger.info("Admin %s logged in", user.user_id)
        return AdminLogin(user=user, session=record, token=token)

    def logout(self, record: SessionRecord, *, now: datetime, face_scan: Optional[str] = None) -> Optional[Attendance]:
        """Close the staff member's open attendance. Admin sessions have no side effect."""
        if record.is_admin:
            return None
        closed = self._attendance.record_logout(user_id=record.user_id, now=now, face_scan=face_scan)
        if closed is None:
            logger.info("Logout for user %s found no open attendance", record.user_id)
        return closed

    def current_user(self, record: SessionRecord, *, now: datetime) -> CurrentUser:
        user = self._users.get_by_id(record.user_id)
        store = self._stores.get_by_id(record.store_id) if record.store_id is not None else None
        if not user or not store:
            raise NotFoundError("User or store not found")
        return CurrentUser(
            user=user,
            store=store,
            attendance=self._attendance.get_latest(user.user_id),
            target=self._targets.get_for_day(user.user_id, now.date()),
        )


class UserService:
    """Use case: provision reference data (users)."""

    def __init__(self, users: UserRepository, stores: StoreRepository, *, passwords: Optional[PasswordVerifier] = None):
        self._users = users
        self._stores = stores
        self._passwords = passwords or WerkzeugPasswordVerifier()

    def create_staff(self, *, phone: str, store_id: int) -> User:
        phone = require_non_empty(phone, "Phone")
        if not self._stores.get_by_id(store_id):
            raise NotFoundError(f"Store {store_id} not found")
        return self._users.create_user(phone=phone, store_id=store_id)

    def create_admin(self, *, phone: str, store_id: int, password: str) -> User:
        phone = require_non_empty(phone, "Phone")
        require_non_empty(password, "Password")
        return self._users.create_user(
            phone=phone,
            store_id=store_id,
            is_admin=True,
            password_hash=self._passwords.hash(password),
        )
