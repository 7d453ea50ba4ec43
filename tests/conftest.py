from __future__ import annotations

import os
import random
from datetime import datetime
from types import SimpleNamespace

import pytest

os.environ.setdefault("APP_ENV", "testing")

from retail_attendance.main import create_app  # noqa: E402
from retail_attendance.container import build_container  # noqa: E402
from retail_attendance.database.bootstrap import seed_demo_data  # noqa: E402


class FakeClock:
    """Settable clock shared by the container and the session guards."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 3, 10, 7, 45, 0))


@pytest.fixture
def container(clock):
    return build_container(clock=clock)


@pytest.fixture
def seeded(container, clock):
    seed_demo_data(container, day=clock().date(), rng=random.Random(7))
    return container


@pytest.fixture
def demo():
    # Ids and credentials created by seed_demo_data
    return SimpleNamespace(
        ikeja_store_id=1,
        lekki_store_id=2,
        ikeja_position={"latitude": 6.5955, "longitude": 3.3671},
        abuja_position={"latitude": 9.0765, "longitude": 7.3986},
        staff_phone="+2348001234567",
        admin_phone="+2348000000000",
        admin_password="admin123",
    )


@pytest.fixture
def login_body(demo):
    def _body(**overrides) -> dict:
        body = {
            "phone": demo.staff_phone,
            "storeId": demo.ikeja_store_id,
            "coordinates": dict(demo.ikeja_position),
            "faceScan": "data:image/jpeg;base64,AAAA",
        }
        body.update(overrides)
        return body

    return _body


@pytest.fixture
def app(seeded):
    return create_app(container=seeded, settings_overrides={"TESTING": True, "AUTO_SEED_DB": False})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def staff_client(client, login_body):
    res = client.post("/login", json=login_body())
    assert res.status_code == 200
    return client


@pytest.fixture
def admin_client(client, demo):
    res = client.post("/admin/login", json={"phone": demo.admin_phone, "password": demo.admin_password})
    assert res.status_code == 200
    return client
