from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .attendance.factory import LoginStatusStrategyFactory
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, now_local
from .core.constants import (
    DEFAULT_CONVERSATION_TARGET,
    DEFAULT_ENGAGEMENT_TARGET,
    DEFAULT_GEOFENCE_RADIUS_METERS,
    DEFAULT_SESSION_HOURS,
)
from .database.memory import MemoryDatabase
from .geo.geofence import Geofence
from .inventory.memory_catalog_repository import MemoryBrandRepository, MemoryProductRepository
from .inventory.memory_inventory_repository import MemoryInventoryRepository
from .inventory.service import InventoryService
from .reports.service import ReportService
from .sessions.store import SessionStore
from .stores.memory_store_repository import MemoryStoreRepository
from .stores.service import StoreService
from .targets.memory_target_repository import MemoryTargetRepository
from .targets.service import TargetService
from .users.memory_user_repository import MemoryUserRepository
from .users.passwords import PasswordVerifier, WerkzeugPasswordVerifier
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    db: MemoryDatabase
    clock: Clock

    users_repo: MemoryUserRepository
    stores_repo: MemoryStoreRepository
    attendance_repo: MemoryAttendanceRepository
    targets_repo: MemoryTargetRepository
    brands_repo: MemoryBrandRepository
    products_repo: MemoryProductRepository
    inventory_repo: MemoryInventoryRepository

    session_store: SessionStore
    geofence: Geofence

    auth_service: AuthService
    user_service: UserService
    store_service: StoreService
    attendance_service: AttendanceService
    target_service: TargetService
    inventory_service: InventoryService
    report_service: ReportService


def build_container(
    *,
    clock: Optional[Clock] = None,
    geofence_radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS,
    session_hours: float = DEFAULT_SESSION_HOURS,
    default_engagement_target: int = DEFAULT_ENGAGEMENT_TARGET,
    default_conversation_target: int = DEFAULT_CONVERSATION_TARGET,
    passwords: Optional[PasswordVerifier] = None,
) -> Container:
    db = MemoryDatabase()
    clock = clock or now_local
    passwords = passwords or WerkzeugPasswordVerifier()

    users_repo = MemoryUserRepository(db)
    stores_repo = MemoryStoreRepository(db)
    attendance_repo = MemoryAttendanceRepository(db)
    targets_repo = MemoryTargetRepository(db)
    brands_repo = MemoryBrandRepository(db)
    products_repo = MemoryProductRepository(db)
    inventory_repo = MemoryInventoryRepository(db)

    session_store = SessionStore(lifetime=timedelta(hours=session_hours))
    geofence = Geofence(radius_meters=geofence_radius_meters)

    attendance_service = AttendanceService(
        attendance_repo,
        strategy_factory=LoginStatusStrategyFactory(),
        transaction=db.transaction,
    )
    target_service = TargetService(
        targets_repo,
        stores_repo,
        default_engagement=default_engagement_target,
        default_conversation=default_conversation_target,
    )
    inventory_service = InventoryService(inventory_repo, brands_repo, products_repo)
    auth_service = AuthService(
        users_repo,
        stores_repo,
        attendance_service,
        target_service,
        inventory_service,
        session_store,
        geofence=geofence,
        passwords=passwords,
        transaction=db.transaction,
    )
    user_service = UserService(users_repo, stores_repo, passwords=passwords)
    store_service = StoreService(stores_repo, geofence=geofence)
    report_service = ReportService(stores_repo, attendance_repo, targets_repo, inventory_repo)

    return Container(
        db=db,
        clock=clock,
        users_repo=users_repo,
        stores_repo=stores_repo,
        attendance_repo=attendance_repo,
        targets_repo=targets_repo,
        brands_repo=brands_repo,
        products_repo=products_repo,
        inventory_repo=inventory_repo,
        session_store=session_store,
        geofence=geofence,
        auth_service=auth_service,
        user_service=user_service,
        store_service=store_service,
        attendance_service=attendance_service,
        target_service=target_service,
        inventory_service=inventory_service,
        report_service=report_service,
    )
