from retail_attendance.main import create_app
from retail_attendance.stores.service import StoreService


def test_create_app_seeds_demo_data_when_enabled():
    app = create_app(settings_overrides={"AUTO_SEED_DB": True, "SEED_RANDOM_SEED": 1})
    container = app.extensions["retail_attendance"]

    assert len(container.stores_repo.list_all()) == 4
    assert len(container.users_repo.list_all()) == 5
    assert len(container.inventory_repo.list_all_joined()) == 20
    assert all(50 <= row.item.opening_stock < 150 for row in container.inventory_repo.list_all_joined())


def test_create_app_without_seed_is_empty():
    app = create_app(settings_overrides={"AUTO_SEED_DB": False})

    res = app.test_client().get("/stores")

    assert res.status_code == 200
    assert res.get_json() == []


def test_geofence_radius_from_settings():
    app = create_app(settings_overrides={"AUTO_SEED_DB": True, "GEOFENCE_RADIUS_METERS": 100})
    container = app.extensions["retail_attendance"]

    assert container.geofence.radius_meters == 100
    # Lekki is about half a kilometre from the Ikeja store
    assert not container.geofence.is_at_store("6.5955,3.3671", 6.593047, 3.363732)


def test_same_seed_gives_same_stock():
    stock = []
    for _ in range(2):
        app = create_app(settings_overrides={"AUTO_SEED_DB": True, "SEED_RANDOM_SEED": 42})
        items = app.extensions["retail_attendance"].inventory_repo.list_all_joined()
        stock.append([row.item.opening_stock for row in items])

    assert stock[0] == stock[1]


def test_find_store_by_coordinates(seeded):
    service: StoreService = seeded.store_service

    assert service.find_by_coordinates(9.07, 7.40).name == "Abuja - Central"
    assert service.find_by_coordinates(6.5955, 3.3671).name == "Lagos - Ikeja"
    assert service.find_by_coordinates(-33.9, 18.4) is None
