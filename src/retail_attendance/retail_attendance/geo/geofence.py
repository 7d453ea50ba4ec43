"""Distance based store geofence.

Store coordinates are stored as ``"lat,lng"`` text; the reported position of
the user comes from the client as two floats.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.constants import DEFAULT_GEOFENCE_RADIUS_METERS, EARTH_RADIUS_KM
from ..core.exceptions import ValidationError


def _check_range(lat: float, lng: float) -> None:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValidationError("Coordinates must be finite numbers")
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Latitude out of range: {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValidationError(f"Longitude out of range: {lng}")


def parse_coordinates(value: str) -> Tuple[float, float]:
    """Parse ``"lat,lng"`` into a (lat, lng) pair."""
    if not isinstance(value, str):
        raise ValidationError("Coordinates must be a 'lat,lng' string")
    parts = value.split(",")
    if len(parts) != 2:
        raise ValidationError(f"Malformed coordinates: {value!r}")
    try:
        lat, lng = float(parts[0].strip()), float(parts[1].strip())
    except ValueError:
        raise ValidationError(f"Malformed coordinates: {value!r}")
    _check_range(lat, lng)
    return lat, lng


def distance_meters(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance using the haversine formula."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * 1000


@dataclass(frozen=True)
class Geofence:
    radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS

    def distance_to_store(self, store_coordinates: str, user_lat: float, user_lng: float) -> float:
        store_lat, store_lng = parse_coordinates(store_coordinates)
        _check_range(float(user_lat), float(user_lng))
        return distance_meters(store_lat, store_lng, float(user_lat), float(user_lng))

    def is_at_store(self, store_coordinates: str, user_lat: float, user_lng: float) -> bool:
        return self.distance_to_store(store_coordinates, user_lat, user_lng) <= self.radius_meters


def is_at_store(
    store_coordinates: str,
    user_lat: float,
    user_lng: float,
    *,
    radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS,
) -> bool:
    return Geofence(radius_meters=radius_meters).is_at_store(store_coordinates, user_lat, user_lng)
