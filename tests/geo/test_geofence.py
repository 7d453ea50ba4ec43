import math

import pytest

from retail_attendance.core.exceptions import ValidationError
from retail_attendance.geo.geofence import Geofence, distance_meters, is_at_store, parse_coordinates


def test_parse_coordinates_accepts_whitespace():
    assert parse_coordinates(" 6.5955, 3.3671 ") == (6.5955, 3.3671)


@pytest.mark.parametrize("value", ["", "6.5", "6.5,3.3,1.0", "abc,3.3", "6.5,", "nan,3.3", "inf,0"])
def test_parse_coordinates_rejects_malformed_text(value):
    with pytest.raises(ValidationError):
        parse_coordinates(value)


@pytest.mark.parametrize("value", ["91,0", "-90.5,0", "0,181", "0,-180.1"])
def test_parse_coordinates_rejects_out_of_range(value):
    with pytest.raises(ValidationError):
        parse_coordinates(value)


def test_distance_is_zero_for_same_point():
    assert distance_meters(6.5955, 3.3671, 6.5955, 3.3671) == 0


def test_distance_one_degree_of_latitude():
    # pi * 6371 km / 180
    assert distance_meters(0, 0, 1, 0) == pytest.approx(math.pi * 6371000 / 180, rel=1e-9)


def test_store_position_is_inside_geofence():
    assert is_at_store("6.5955,3.3671", 6.5955, 3.3671)


def test_nearby_store_is_inside_default_radius():
    # Ikeja to Lekki demo stores, well under 30 km
    assert is_at_store("6.5955,3.3671", 6.593047, 3.363732)


def test_other_city_is_outside_default_radius():
    # Ikeja to Abuja, several hundred km
    assert not is_at_store("6.5955,3.3671", 9.0765, 7.3986)


def test_radius_boundary_is_inclusive():
    fence = Geofence(radius_meters=1000)
    d = fence.distance_to_store("0,0", 0.005, 0)

    assert Geofence(radius_meters=d).is_at_store("0,0", 0.005, 0)
    assert not Geofence(radius_meters=d - 0.01).is_at_store("0,0", 0.005, 0)


def test_user_position_out_of_range_is_rejected():
    with pytest.raises(ValidationError):
        Geofence().is_at_store("0,0", 100.0, 0.0)
