from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

WORKERS = 8
ROUNDS = 25


def _run_together(*jobs):
    barrier = threading.Barrier(len(jobs))

    def _wrap(job):
        def _run():
            barrier.wait()
            for _ in range(ROUNDS):
                job()

        return _run

    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = [pool.submit(_wrap(job)) for job in jobs]
        for f in futures:
            f.result()


def test_parallel_login_and_logout_keep_one_open_record(seeded, clock, demo):
    user = seeded.users_repo.get_by_phone(demo.staff_phone)

    def login():
        seeded.auth_service.staff_login(
            phone=demo.staff_phone,
            store_id=demo.ikeja_store_id,
            latitude=demo.ikeja_position["latitude"],
            longitude=demo.ikeja_position["longitude"],
            face_scan="scan",
            now=clock(),
        )

    def logout():
        seeded.attendance_service.record_logout(user_id=user.user_id, now=clock() + timedelta(minutes=5))

    _run_together(*([login] * (WORKERS // 2) + [logout] * (WORKERS // 2)))

    records = seeded.attendance_repo.list_for_user(user.user_id)
    open_records = [r for r in records if r.is_open]
    assert len(records) == (WORKERS // 2) * ROUNDS
    assert len(open_records) <= 1
    assert seeded.attendance_service.get_open(user.user_id) == (open_records[0] if open_records else None)
    for r in records:
        if not r.is_open:
            assert r.logout_time is not None
            assert r.duration in (0, 5)


def test_parallel_target_updates_do_not_lose_fields(seeded):
    target = seeded.targets_repo.list_all()[0]

    def engagement():
        seeded.target_service.update(target.target_id, {"engagement_achieved": 10})

    def conversation():
        seeded.target_service.update(target.target_id, {"conversation_achieved": 20})

    _run_together(*([engagement] * (WORKERS // 2) + [conversation] * (WORKERS // 2)))

    final = seeded.targets_repo.get_by_id(target.target_id)
    assert final.engagement_achieved == 10
    assert final.conversation_achieved == 20
    assert final.engagement_daily_target == target.engagement_daily_target


def test_parallel_closing_stock_updates_keep_units_sold_consistent(seeded):
    item = seeded.inventory_service.list_for_store(1)[0].item

    jobs = [
        (lambda closing=closing: seeded.inventory_service.record_closing_stock(item.inventory_id, closing))
        for closing in range(WORKERS)
    ]
    _run_together(*jobs)

    final = seeded.inventory_repo.get_by_id(item.inventory_id)
    assert final.closing_stock in range(WORKERS)
    assert final.units_sold == item.opening_stock - final.closing_stock
