from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Brand, InventoryItem, InventoryRow, Product


class BrandRepository(Protocol):
    def get_by_id(self, brand_id: int) -> Optional[Brand]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Brand]:
        raise NotImplementedError

    def create_brand(self, *, name: str) -> Brand:
        raise NotImplementedError


class ProductRepository(Protocol):
    def get_by_id(self, product_id: int) -> Optional[Product]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Product]:
        raise NotImplementedError

    def list_for_brand(self, brand_id: int) -> Sequence[Product]:
        raise NotImplementedError

    def create_product(self, *, name: str, brand_id: int) -> Product:
        raise NotImplementedError


class InventoryRepository(Protocol):
    def get_by_id(self, inventory_id: int) -> Optional[InventoryItem]:
        raise NotImplementedError

    def create_inventory(
        self,
        *,
        store_id: int,
        product_id: int,
        opening_stock: int,
        inventory_date: date,
    ) -> InventoryItem:
        raise NotImplementedError

    def update_closing_stock(self, inventory_id: int, closing_stock: int) -> Optional[InventoryItem]:
        """Set closing stock and recompute units sold. None when missing."""

        raise NotImplementedError

    def list_for_product(self, product_id: int) -> Sequence[InventoryItem]:
        raise NotImplementedError

    def list_for_store_joined(self, store_id: int) -> Sequence[InventoryRow]:
        raise NotImplementedError

    def list_all_joined(self) -> Sequence[InventoryRow]:
        raise NotImplementedError
