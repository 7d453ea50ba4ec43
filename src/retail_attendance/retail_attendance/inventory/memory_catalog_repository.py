from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from ..database.memory import MemoryDatabase
from .model import Brand, Product
from .repository import BrandRepository, ProductRepository


class MemoryBrandRepository(BrandRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, brand_id: int) -> Optional[Brand]:
        return self._db.table("brands").get(brand_id)

    def list_all(self) -> Sequence[Brand]:
        return sorted(self._db.table("brands").values(), key=lambda b: b.brand_id)

    def create_brand(self, *, name: str) -> Brand:
        name = require_non_empty(name, "Brand name")
        with self._db.transaction() as db:
            if any(b.name == name for b in db.table("brands").values()):
                raise ConflictError(f"Brand already exists: {name}")
            brand = Brand(brand_id=db.next_id("brands"), name=name)
            db.table("brands")[brand.brand_id] = brand
            return brand


class MemoryProductRepository(ProductRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._db.table("products").get(product_id)

    def list_all(self) -> Sequence[Product]:
        return sorted(self._db.table("products").values(), key=lambda p: p.product_id)

    def list_for_brand(self, brand_id: int) -> Sequence[Product]:
        return [p for p in self.list_all() if p.brand_id == brand_id]

    def create_product(self, *, name: str, brand_id: int) -> Product:
        name = require_non_empty(name, "Product name")
        with self._db.transaction() as db:
            if brand_id not in db.table("brands"):
                raise NotFoundError(f"Brand {brand_id} not found")
            product = Product(product_id=db.next_id("products"), name=name, brand_id=int(brand_id))
            db.table("products")[product.product_id] = product
            return product
