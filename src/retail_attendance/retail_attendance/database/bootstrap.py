"""Demo reference data.

State lives in memory only, so the app seeds it again on every start when
``AUTO_SEED_DB`` is enabled.
"""
from __future__ import annotations

import logging
import random
from datetime import date
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEMO_STORES = [
    {"name": "Lagos - Ikeja", "location": "Ikeja, Lagos", "coordinates": "6.5955,3.3671"},
    {"name": "Lagos - Lekki", "location": "Lekki, Lagos", "coordinates": "6.593047,3.363732"},
    {"name": "Abuja - Central", "location": "Central, Abuja", "coordinates": "9.0765,7.3986"},
    {"name": "Port Harcourt", "location": "Port Harcourt", "coordinates": "4.8156,7.0498"},
]

DEMO_ADMIN = {"phone": "+2348000000000", "password": "admin123", "store_index": 0}

# (phone, index into DEMO_STORES)
DEMO_STAFF = [
    ("+2348001234567", 0),
    ("+2348012345678", 1),
    ("+2348023456789", 2),
    ("+2348034567890", 3),
]

DEMO_BRANDS = ["Dettol", "Harpic", "Mortein", "Air Wick"]

# (product name, index into DEMO_BRANDS)
DEMO_PRODUCTS = [
    ("Dettol Original Soap 100g", 0),
    ("Dettol Cool Soap 100g", 0),
    ("Harpic Power Plus 500ml", 1),
    ("Mortein Instant Power Spray 300ml", 2),
    ("Air Wick Freshmatic Refill Lavender", 3),
]


def seed_demo_data(container: "Container", *, day: date, rng: Optional[random.Random] = None) -> None:
    """Populate an empty store with the demo stores, users, catalog, stock and targets."""
    rng = rng or random.Random()

    stores = [container.stores_repo.create_store(**s) for s in DEMO_STORES]

    container.user_service.create_admin(
        phone=DEMO_ADMIN["phone"],
        store_id=stores[DEMO_ADMIN["store_index"]].store_id,
        password=DEMO_ADMIN["password"],
    )
    staff = [container.user_service.create_staff(phone=phone, store_id=stores[i].store_id) for phone, i in DEMO_STAFF]

    brands = [container.brands_repo.create_brand(name=name) for name in DEMO_BRANDS]
    products = [
        container.products_repo.create_product(name=name, brand_id=brands[i].brand_id) for name, i in DEMO_PRODUCTS
    ]

    for store in stores:
        for product in products:
            container.inventory_service.open_stock(
                store_id=store.store_id,
                product_id=product.product_id,
                opening_stock=rng.randint(50, 149),
                day=day,
            )

    for user in staff:
        container.target_service.get_or_create_for_day(user, day)

    logger.info(
        "Seeded demo data: %d stores, %d users, %d products",
        len(stores),
        len(staff) + 1,
        len(products),
    )
