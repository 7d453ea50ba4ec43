from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    """Static reference data: one retail outlet and its geofence anchor."""

    store_id: int
    name: str
    location: str
    coordinates: str

    def to_dict(self) -> dict:
        return {
            "id": self.store_id,
            "name": self.name,
            "location": self.location,
            "coordinates": self.coordinates,
        }
