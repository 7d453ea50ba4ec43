from __future__ import annotations

import pytest


@pytest.fixture
def hundred_units(seeded, clock):
    return seeded.inventory_service.open_stock(store_id=1, product_id=1, opening_stock=100, day=clock().date())


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/inventory/store/1"),
        ("put", "/inventory/1"),
        ("get", "/brands"),
        ("put", "/targets/1"),
    ],
)
def test_staff_endpoints_need_a_session(client, method, path):
    res = getattr(client, method)(path, json={})

    assert res.status_code == 401


def test_closing_stock_85_of_100_is_good(staff_client, hundred_units):
    res = staff_client.put(f"/inventory/{hundred_units.inventory_id}", json={"closingStock": 85})

    assert res.status_code == 200
    body = res.get_json()
    assert body["unitsSold"] == 15
    assert body["status"] == "Good"
    assert body["statusLabel"] == "Good (85%)"


def test_closing_stock_30_of_100_is_very_low(staff_client, hundred_units):
    res = staff_client.put(f"/inventory/{hundred_units.inventory_id}", json={"closingStock": 30})

    body = res.get_json()
    assert body["unitsSold"] == 70
    assert body["statusLabel"] == "VeryLow (30%)"


@pytest.mark.parametrize("payload", [{"closingStock": -1}, {"closingStock": "5"}, {"closingStock": 2.5}, {}])
def test_invalid_closing_stock(staff_client, hundred_units, payload, seeded):
    res = staff_client.put(f"/inventory/{hundred_units.inventory_id}", json=payload)

    assert res.status_code == 400
    assert seeded.inventory_repo.get_by_id(hundred_units.inventory_id).closing_stock is None


def test_unknown_inventory_item(staff_client):
    res = staff_client.put("/inventory/9999", json={"closingStock": 1})

    assert res.status_code == 404
    assert res.get_json()["message"] == "Inventory item not found"


def test_store_inventory_listing(staff_client):
    body = staff_client.get("/inventory/store/2").get_json()

    assert len(body) == 5
    assert all(row["storeId"] == 2 for row in body)


def test_brands(staff_client):
    body = staff_client.get("/brands").get_json()

    assert [b["name"] for b in body] == ["Dettol", "Harpic", "Mortein", "Air Wick"]


def test_update_target_achievements(staff_client, seeded):
    target = seeded.targets_repo.list_all()[0]

    res = staff_client.put(f"/targets/{target.target_id}", json={"engagementAchieved": 20, "conversationAchieved": 15})

    assert res.status_code == 200
    body = res.get_json()
    assert body["engagementAchieved"] == 20
    assert body["engagementPercentage"] == 40
    assert body["conversationPercentage"] == 50
    assert body["engagementDailyTarget"] == 50


@pytest.mark.parametrize(
    "payload",
    [{}, {"engagementAchieved": -1}, {"engagementAchieved": "3"}, {"userId": 2}],
)
def test_update_target_rejects_bad_payload(staff_client, seeded, payload):
    target = seeded.targets_repo.list_all()[0]

    res = staff_client.put(f"/targets/{target.target_id}", json=payload)

    assert res.status_code == 400
    assert seeded.targets_repo.get_by_id(target.target_id) == target


def test_update_unknown_target(staff_client):
    res = staff_client.put("/targets/9999", json={"engagementAchieved": 1})

    assert res.status_code == 404
