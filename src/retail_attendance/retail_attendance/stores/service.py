from __future__ import annotations

from typing import Optional, Sequence

from ..geo.geofence import Geofence
from .model import Store
from .repository import StoreRepository


class StoreService:
    def __init__(self, stores: StoreRepository, *, geofence: Geofence):
        self._stores = stores
        self._geofence = geofence

    def list_stores(self) -> Sequence[Store]:
        return self._stores.list_all()

    def find_by_coordinates(self, latitude: float, longitude: float) -> Optional[Store]:
        """Nearest store whose geofence contains the given position."""
        best: Optional[Store] = None
        best_distance = None
        for store in self._stores.list_all():
            distance = self._geofence.distance_to_store(store.coordinates, latitude, longitude)
            if distance > self._geofence.radius_meters:
                continue
            if best_distance is None or distance < best_distance:
                best, best_distance = store, distance
        return best
