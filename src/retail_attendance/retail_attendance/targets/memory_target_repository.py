from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.exceptions import ConflictError, ValidationError
from ..database.memory import MemoryDatabase
from .model import Target, TargetView
from .repository import TargetRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "engagement_daily_target",
        "engagement_achieved",
        "conversation_daily_target",
        "conversation_achieved",
    }
)


class MemoryTargetRepository(TargetRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db
        self._by_user_date: dict[tuple[int, date], int] = {}

    def _rows(self) -> list[Target]:
        return sorted(self._db.table("targets").values(), key=lambda t: t.target_id)

    def get_by_id(self, target_id: int) -> Optional[Target]:
        return self._db.table("targets").get(target_id)

    def get_for_user_and_date(self, user_id: int, target_date: date) -> Optional[Target]:
        target_id = self._by_user_date.get((user_id, target_date))
        if target_id is None:
            return None
        return self.get_by_id(target_id)

    def create_target(
        self,
        *,
        user_id: int,
        store_id: int,
        engagement_daily_target: int,
        conversation_daily_target: int,
        target_date: date,
    ) -> Target:
        with self._db.transaction() as db:
            key = (user_id, target_date)
            if key in self._by_user_date:
                raise ConflictError(f"Target already exists for user {user_id} on {target_date.isoformat()}")
            target = Target(
                target_id=db.next_id("targets"),
                user_id=user_id,
                store_id=store_id,
                engagement_daily_target=int(engagement_daily_target),
                conversation_daily_target=int(conversation_daily_target),
                target_date=target_date,
            )
            db.table("targets")[target.target_id] = target
            self._by_user_date[key] = target.target_id
            return target

    def update_target(self, target_id: int, changes: Mapping[str, int]) -> Optional[Target]:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown target fields: {', '.join(sorted(unknown))}")
        with self._db.transaction() as db:
            target = db.table("targets").get(target_id)
            if not target:
                return None
            updated = dataclasses.replace(target, **{k: int(v) for k, v in changes.items()})
            db.table("targets")[target_id] = updated
            return updated

    def list_all(self) -> Sequence[Target]:
        return self._rows()

    def list_for_store_joined(self, store_id: int) -> Sequence[TargetView]:
        users = self._db.table("users")
        stores = self._db.table("stores")
        out: list[TargetView] = []
        for t in self._rows():
            if t.store_id != store_id:
                continue
            user = users.get(t.user_id)
            store = stores.get(t.store_id)
            if not user or not store:
                logger.warning("Skipping target %s: user %s or store %s not found", t.target_id, t.user_id, t.store_id)
                continue
            out.append(TargetView(target=t, user=user, store=store))
        return out
