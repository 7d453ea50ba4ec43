from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..stores.model import Store
from .reconciliation import Reconciliation, reconcile


@dataclass(frozen=True)
class Brand:
    brand_id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.brand_id, "name": self.name}


@dataclass(frozen=True)
class Product:
    product_id: int
    name: str
    brand_id: int

    def to_dict(self) -> dict:
        return {"id": self.product_id, "name": self.name, "brandId": self.brand_id}


@dataclass(frozen=True)
class InventoryItem:
    """Opening vs closing stock of one product at one store for one day."""

    inventory_id: int
    store_id: int
    product_id: int
    opening_stock: int
    inventory_date: date
    closing_stock: Optional[int] = None
    units_sold: Optional[int] = None

    def reconciliation(self) -> Reconciliation:
        return reconcile(self.opening_stock, self.closing_stock)

    def to_dict(self) -> dict:
        rec = self.reconciliation()
        return {
            "id": self.inventory_id,
            "storeId": self.store_id,
            "productId": self.product_id,
            "openingStock": self.opening_stock,
            "closingStock": self.closing_stock,
            "unitsSold": self.units_sold,
            "status": rec.status.value,
            "stockPercentage": rec.percentage,
            "statusLabel": rec.label,
            "date": self.inventory_date.isoformat(),
        }


@dataclass(frozen=True)
class InventoryRow:
    """Read-model: inventory joined with its product, brand and (optionally) store."""

    item: InventoryItem
    product: Product
    brand: Brand
    store: Optional[Store] = None

    def to_dict(self) -> dict:
        out = self.item.to_dict()
        product = self.product.to_dict()
        product["brand"] = self.brand.to_dict()
        out["product"] = product
        if self.store:
            out["store"] = self.store.to_dict()
            out["storeName"] = self.store.name
        return out
