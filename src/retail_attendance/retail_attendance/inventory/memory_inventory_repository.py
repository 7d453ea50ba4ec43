from __future__ import annotations

import dataclasses
import logging
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_negative
from ..database.memory import MemoryDatabase
from .model import InventoryItem, InventoryRow
from .reconciliation import reconcile
from .repository import InventoryRepository

logger = logging.getLogger(__name__)


class MemoryInventoryRepository(InventoryRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def _rows(self) -> list[InventoryItem]:
        return sorted(self._db.table("inventory").values(), key=lambda i: i.inventory_id)

    def get_by_id(self, inventory_id: int) -> Optional[InventoryItem]:
        return self._db.table("inventory").get(inventory_id)

    def create_inventory(
        self,
        *,
        store_id: int,
        product_id: int,
        opening_stock: int,
        inventory_date: date,
    ) -> InventoryItem:
        opening_stock = require_non_negative(opening_stock, "Opening stock")
        with self._db.transaction() as db:
            item = InventoryItem(
                inventory_id=db.next_id("inventory"),
                store_id=int(store_id),
                product_id=int(product_id),
                opening_stock=opening_stock,
                inventory_date=inventory_date,
            )
            db.table("inventory")[item.inventory_id] = item
            return item

    def update_closing_stock(self, inventory_id: int, closing_stock: int) -> Optional[InventoryItem]:
        with self._db.transaction() as db:
            item = db.table("inventory").get(inventory_id)
            if not item:
                return None
            rec = reconcile(item.opening_stock, closing_stock)
            updated = dataclasses.replace(item, closing_stock=int(closing_stock), units_sold=rec.units_sold)
            db.table("inventory")[inventory_id] = updated
            return updated

    def list_for_product(self, product_id: int) -> Sequence[InventoryItem]:
        return [i for i in self._rows() if i.product_id == product_id]

    def _join(self, items: list[InventoryItem], *, with_store: bool) -> list[InventoryRow]:
        products = self._db.table("products")
        brands = self._db.table("brands")
        stores = self._db.table("stores")
        out: list[InventoryRow] = []
        for item in items:
            product = products.get(item.product_id)
            if not product:
                logger.warning("Skipping inventory %s: product %s not found", item.inventory_id, item.product_id)
                continue
            brand = brands.get(product.brand_id)
            if not brand:
                logger.warning("Skipping inventory %s: brand %s not found", item.inventory_id, product.brand_id)
                continue
            store = None
            if with_store:
                store = stores.get(item.store_id)
                if not store:
                    logger.warning("Skipping inventory %s: store %s not found", item.inventory_id, item.store_id)
                    continue
            out.append(InventoryRow(item=item, product=product, brand=brand, store=store))
        return out

    def list_for_store_joined(self, store_id: int) -> Sequence[InventoryRow]:
        return self._join([i for i in self._rows() if i.store_id == store_id], with_store=False)

    def list_all_joined(self) -> Sequence[InventoryRow]:
        return self._join(self._rows(), with_store=True)
