from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.constants import DEFAULT_CONVERSATION_TARGET, DEFAULT_ENGAGEMENT_TARGET
from ..core.exceptions import NotFoundError
from ..stores.repository import StoreRepository
from ..users.model import User
from .model import Target, TargetView
from .repository import TargetRepository


class TargetService:
    def __init__(
        self,
        targets: TargetRepository,
        stores: StoreRepository,
        *,
        default_engagement: int = DEFAULT_ENGAGEMENT_TARGET,
        default_conversation: int = DEFAULT_CONVERSATION_TARGET,
    ):
        self._targets = targets
        self._stores = stores
        self._default_engagement = int(default_engagement)
        self._default_conversation = int(default_conversation)

    def get_for_day(self, user_id: int, day: date) -> Optional[Target]:
        return self._targets.get_for_user_and_date(user_id, day)

    def get_or_create_for_day(self, user: User, day: date) -> Target:
        """Lazily create today's quota on the first login of the day."""
        target = self._targets.get_for_user_and_date(user.user_id, day)
        if target:
            return target
        return self._targets.create_target(
            user_id=user.user_id,
            store_id=user.store_id,
            engagement_daily_target=self._default_engagement,
            conversation_daily_target=self._default_conversation,
            target_date=day,
        )

    def update(self, target_id: int, changes: Mapping[str, int]) -> Target:
        target = self._targets.update_target(target_id, changes)
        if not target:
            raise NotFoundError("Target not found")
        return target

    def list_for_store(self, store_id: int) -> Sequence[TargetView]:
        return self._targets.list_for_store_joined(store_id)

    def list_all(self) -> Sequence[TargetView]:
        out: list[TargetView] = []
        for store in self._stores.list_all():
            out.extend(self.list_for_store(store.store_id))
        return out
