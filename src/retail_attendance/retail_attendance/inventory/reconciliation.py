"""Inventory reconciliation.

Single source of truth for units sold and stock health. Every place that shows
or aggregates inventory (the staff update, store listings, admin reports, the
spreadsheet export) goes through :func:`reconcile` so the thresholds cannot
drift apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import STOCK_GOOD_PERCENT, STOCK_LOW_PERCENT
from ..core.enums import StockStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Reconciliation:
    units_sold: Optional[int]
    status: StockStatus
    percentage: Optional[int] = None

    @property
    def label(self) -> str:
        if self.status == StockStatus.UNKNOWN or self.percentage is None:
            return "-"
        return f"{self.status.value} ({self.percentage}%)"


def reconcile(opening_stock: int, closing_stock: Optional[int]) -> Reconciliation:
    if opening_stock is None or opening_stock < 0:
        raise ValidationError("Opening stock must be zero or greater")
    if closing_stock is None:
        return Reconciliation(units_sold=None, status=StockStatus.UNKNOWN)
    if closing_stock < 0:
        raise ValidationError("Closing stock must be zero or greater")

    units_sold = max(opening_stock - closing_stock, 0)
    if opening_stock == 0:
        return Reconciliation(units_sold=units_sold, status=StockStatus.UNKNOWN)

    # Compare closing/opening*100 against the thresholds without floats.
    scaled = closing_stock * 100
    if scaled >= STOCK_GOOD_PERCENT * opening_stock:
        status = StockStatus.GOOD
    elif scaled >= STOCK_LOW_PERCENT * opening_stock:
        status = StockStatus.LOW
    else:
        status = StockStatus.VERY_LOW

    percentage = (closing_stock * 200 + opening_stock) // (2 * opening_stock)
    return Reconciliation(units_sold=units_sold, status=status, percentage=percentage)
