from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Store


class StoreRepository(Protocol):
    def get_by_id(self, store_id: int) -> Optional[Store]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Store]:
        raise NotImplementedError

    def create_store(self, *, name: str, location: str, coordinates: str) -> Store:
        raise NotImplementedError
