from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..database.memory import MemoryDatabase
from ..geo.geofence import parse_coordinates
from .model import Store
from .repository import StoreRepository


class MemoryStoreRepository(StoreRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, store_id: int) -> Optional[Store]:
        return self._db.table("stores").get(store_id)

    def list_all(self) -> Sequence[Store]:
        return sorted(self._db.table("stores").values(), key=lambda s: s.store_id)

    def create_store(self, *, name: str, location: str, coordinates: str) -> Store:
        name = require_non_empty(name, "Store name")
        parse_coordinates(coordinates)
        with self._db.transaction() as db:
            store = Store(
                store_id=db.next_id("stores"),
                name=name,
                location=location or "",
                coordinates=coordinates.strip(),
            )
            db.table("stores")[store.store_id] = store
            return store
