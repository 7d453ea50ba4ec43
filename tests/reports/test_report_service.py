from __future__ import annotations

from datetime import datetime, timedelta

import pytest


def _staff_login(container, phone, store_id, position, now):
    return container.auth_service.staff_login(
        phone=phone,
        store_id=store_id,
        latitude=position[0],
        longitude=position[1],
        face_scan="scan",
        now=now,
    )


def test_summary_counts_todays_logins_by_status(seeded, clock):
    day = clock().date()
    midnight = datetime.combine(day, datetime.min.time())
    _staff_login(seeded, "+2348001234567", 1, (6.5955, 3.3671), midnight + timedelta(hours=7))
    _staff_login(seeded, "+2348012345678", 2, (6.593047, 3.363732), midnight + timedelta(hours=8, minutes=30))
    _staff_login(seeded, "+2348023456789", 3, (9.0765, 7.3986), midnight + timedelta(hours=10))

    summary = seeded.report_service.build_summary(day=day)

    assert summary.to_dict() == {
        "totalStores": 4,
        "activeStores": 3,
        "earlyCount": 1,
        "ontimeCount": 1,
        "lateCount": 1,
    }


def test_summary_ignores_other_days_and_counts_stores_once(seeded, clock):
    day = clock().date()
    morning = datetime.combine(day, datetime.min.time()) + timedelta(hours=7)
    _staff_login(seeded, "+2348001234567", 1, (6.5955, 3.3671), morning - timedelta(days=1))
    _staff_login(seeded, "+2348001234567", 1, (6.5955, 3.3671), morning)
    _staff_login(seeded, "+2348001234567", 1, (6.5955, 3.3671), morning + timedelta(hours=3))

    summary = seeded.report_service.build_summary(day=day)

    assert summary.active_stores == 1
    assert summary.early_count == 1
    assert summary.late_count == 1
    assert summary.ontime_count == 0


def test_empty_summary(container, clock):
    assert container.report_service.build_summary(day=clock().date()).to_dict() == {
        "totalStores": 0,
        "activeStores": 0,
        "earlyCount": 0,
        "ontimeCount": 0,
        "lateCount": 0,
    }


def test_inventory_sheet_rows(seeded):
    first = seeded.inventory_service.list_all()[0].item
    seeded.inventory_service.record_closing_stock(first.inventory_id, first.opening_stock)

    rows = seeded.report_service.build_inventory_sheet()

    assert len(rows) == 20
    assert rows[0]["Store"] == "Lagos - Ikeja"
    assert rows[0]["Brand"] == "Dettol"
    assert rows[0]["Expected Products"] == first.opening_stock
    assert rows[0]["Available Products"] == first.opening_stock
    assert rows[0]["Status"] == "Good (100%)"
    assert rows[1]["Available Products"] == "N/A"
    assert rows[1]["Status"] == "-"
    assert rows[0]["Date"] == "2025-03-10"


def test_store_performance_sorted_by_unsold_stock(seeded, clock):
    # sell everything at the last store
    for row in seeded.inventory_service.list_for_store(4):
        seeded.inventory_service.record_closing_stock(row.item.inventory_id, 0)

    perf = seeded.report_service.build_store_performance(day=clock().date())

    assert len(perf) == 4
    assert perf[0].store_id == 4
    assert perf[0].unsold_stock == 0
    assert perf[0].units_sold == perf[0].total_stock
    assert perf[0].engagement_target == 50
    assert perf[0].conversation_target == 30
    unsold = [p.unsold_stock for p in perf]
    assert unsold == sorted(unsold)


def test_store_performance_targets_limited_to_day(seeded, clock):
    perf = seeded.report_service.build_store_performance(day=clock().date() + timedelta(days=1))

    assert all(p.engagement_target == 0 for p in perf)


@pytest.mark.parametrize("achieved, expected", [(0, 0), (25, 50), (50, 100), (60, 120)])
def test_target_percentages(seeded, achieved, expected):
    target = seeded.targets_repo.list_all()[0]

    updated = seeded.target_service.update(target.target_id, {"engagement_achieved": achieved})

    assert updated.to_dict()["engagementPercentage"] == expected
