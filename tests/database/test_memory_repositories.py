from __future__ import annotations

from datetime import date

import pytest

from retail_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from retail_attendance.database.memory import MemoryDatabase
from retail_attendance.stores.memory_store_repository import MemoryStoreRepository
from retail_attendance.targets.memory_target_repository import MemoryTargetRepository
from retail_attendance.targets.service import TargetService
from retail_attendance.users.memory_user_repository import MemoryUserRepository


def test_ids_start_at_one_and_are_not_reused():
    db = MemoryDatabase()
    stores = MemoryStoreRepository(db)
    a = stores.create_store(name="A", location="x", coordinates="1,1")
    b = stores.create_store(name="B", location="x", coordinates="2,2")
    del db.table("stores")[b.store_id]
    c = stores.create_store(name="C", location="x", coordinates="3,3")

    assert (a.store_id, b.store_id, c.store_id) == (1, 2, 3)
    assert [s.name for s in stores.list_all()] == ["A", "C"]


def test_store_coordinates_are_validated():
    stores = MemoryStoreRepository(MemoryDatabase())

    with pytest.raises(ValidationError):
        stores.create_store(name="Bad", location="x", coordinates="north")


def test_users_by_phone():
    users = MemoryUserRepository(MemoryDatabase())
    u = users.create_user(phone="+1", store_id=1)

    assert users.get_by_phone("+1") == u
    assert users.get_by_phone("+2") is None
    with pytest.raises(ConflictError):
        users.create_user(phone="+1", store_id=2)


def test_one_target_per_user_and_day():
    targets = MemoryTargetRepository(MemoryDatabase())
    day = date(2025, 3, 10)
    targets.create_target(user_id=1, store_id=1, engagement_daily_target=5, conversation_daily_target=3, target_date=day)

    with pytest.raises(ConflictError):
        targets.create_target(
            user_id=1, store_id=1, engagement_daily_target=5, conversation_daily_target=3, target_date=day
        )


def test_target_update_only_touches_given_fields():
    db = MemoryDatabase()
    t = MemoryTargetRepository(db)
    service = TargetService(t, MemoryStoreRepository(db))
    created = t.create_target(
        user_id=1, store_id=1, engagement_daily_target=50, conversation_daily_target=30, target_date=date(2025, 3, 10)
    )

    updated = service.update(created.target_id, {"conversation_achieved": 12})

    assert updated.conversation_achieved == 12
    assert updated.engagement_achieved == 0
    assert updated.engagement_daily_target == 50


def test_target_update_unknown_id():
    db = MemoryDatabase()
    service = TargetService(MemoryTargetRepository(db), MemoryStoreRepository(db))

    with pytest.raises(NotFoundError):
        service.update(404, {"engagement_achieved": 1})


def test_target_update_rejects_unknown_field():
    db = MemoryDatabase()
    t = MemoryTargetRepository(db)
    created = t.create_target(
        user_id=1, store_id=1, engagement_daily_target=50, conversation_daily_target=30, target_date=date(2025, 3, 10)
    )

    with pytest.raises(ValidationError):
        t.update_target(created.target_id, {"user_id": 9})


def test_seeded_catalog_queries(seeded, clock):
    dettol = seeded.brands_repo.list_all()[0]
    products = seeded.products_repo.list_for_brand(dettol.brand_id)

    assert [p.name for p in products] == ["Dettol Original Soap 100g", "Dettol Cool Soap 100g"]
    assert len(seeded.inventory_repo.list_for_product(products[0].product_id)) == 4


def test_attendance_queries_by_user_and_store(seeded, clock):
    seeded.auth_service.staff_login(
        phone="+2348001234567", store_id=1, latitude=6.5955, longitude=3.3671, face_scan="scan", now=clock()
    )

    assert len(seeded.attendance_repo.list_for_store(1)) == 1
    assert seeded.attendance_repo.list_for_store(2) == []
    assert len(seeded.attendance_repo.list_for_user(2)) == 1  # user 1 is the admin


def test_targets_for_one_store_and_for_all(seeded):
    per_store = seeded.target_service.list_for_store(2)

    assert [v.user.phone for v in per_store] == ["+2348012345678"]
    assert per_store[0].store.name == "Lagos - Lekki"
    assert [v.target.target_id for v in seeded.target_service.list_all()] == [
        v.target.target_id for s in (1, 2, 3, 4) for v in seeded.target_service.list_for_store(s)
    ]
