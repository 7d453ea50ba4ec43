from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.exceptions import NotFoundError
from .model import Brand, InventoryItem, InventoryRow
from .repository import BrandRepository, InventoryRepository, ProductRepository


class InventoryService:
    def __init__(self, inventory: InventoryRepository, brands: BrandRepository, products: ProductRepository):
        self._inventory = inventory
        self._brands = brands
        self._products = products

    def list_brands(self) -> Sequence[Brand]:
        return self._brands.list_all()

    def list_for_store(self, store_id: int) -> Sequence[InventoryRow]:
        return self._inventory.list_for_store_joined(store_id)

    def list_all(self) -> Sequence[InventoryRow]:
        return self._inventory.list_all_joined()

    def record_closing_stock(self, inventory_id: int, closing_stock: int) -> InventoryItem:
        # closing > opening is accepted; reconciliation clamps units sold at 0.
        item = self._inventory.update_closing_stock(inventory_id, closing_stock)
        if not item:
            raise NotFoundError("Inventory item not found")
        return item

    def open_stock(self, *, store_id: int, product_id: int, opening_stock: int, day: date) -> InventoryItem:
        if not self._products.get_by_id(product_id):
            raise NotFoundError(f"Product {product_id} not found")
        return self._inventory.create_inventory(
            store_id=store_id,
            product_id=product_id,
            opening_stock=opening_stock,
            inventory_date=day,
        )
