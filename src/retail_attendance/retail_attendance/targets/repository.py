from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import Target, TargetView


class TargetRepository(Protocol):
    def get_by_id(self, target_id: int) -> Optional[Target]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, target_date: date) -> Optional[Target]:
        raise NotImplementedError

    def create_target(
        self,
        *,
        user_id: int,
        store_id: int,
        engagement_daily_target: int,
        conversation_daily_target: int,
        target_date: date,
    ) -> Target:
        raise NotImplementedError

    def update_target(self, target_id: int, changes: Mapping[str, int]) -> Optional[Target]:
        """Apply a partial update of the counters/quotas. None when missing."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Target]:
        raise NotImplementedError

    def list_for_store_joined(self, store_id: int) -> Sequence[TargetView]:
        raise NotImplementedError
