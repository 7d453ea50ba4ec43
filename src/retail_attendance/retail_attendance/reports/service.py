from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..core.enums import LoginStatus
from ..inventory.repository import InventoryRepository
from ..stores.repository import StoreRepository
from ..targets.repository import TargetRepository

INVENTORY_SHEET_COLUMNS = [
    "Store",
    "Product",
    "Brand",
    "Expected Products",
    "Available Products",
    "Status",
    "Date",
]


@dataclass(frozen=True)
class AdminSummary:
    total_stores: int
    active_stores: int
    early_count: int
    ontime_count: int
    late_count: int

    def to_dict(self) -> dict:
        return {
            "totalStores": self.total_stores,
            "activeStores": self.active_stores,
            "earlyCount": self.early_count,
            "ontimeCount": self.ontime_count,
            "lateCount": self.late_count,
        }


@dataclass(frozen=True)
class StorePerformance:
    store_id: int
    store_name: str
    total_stock: int
    units_sold: int
    engagement_target: int
    engagement_achieved: int
    conversation_target: int
    conversation_achieved: int

    @property
    def unsold_stock(self) -> int:
        return self.total_stock - self.units_sold

    def to_dict(self) -> dict:
        return {
            "storeId": self.store_id,
            "storeName": self.store_name,
            "totalStock": self.total_stock,
            "itemsSold": self.units_sold,
            "unsoldStock": self.unsold_stock,
            "engagementDailyTarget": self.engagement_target,
            "engagementAchieved": self.engagement_achieved,
            "conversationDailyTarget": self.conversation_target,
            "conversationAchieved": self.conversation_achieved,
        }


class ReportService:
    """Admin aggregates across stores, attendance, targets and inventory."""

    def __init__(
        self,
        stores: StoreRepository,
        attendance: AttendanceRepository,
        targets: TargetRepository,
        inventory: InventoryRepository,
    ):
        self._stores = stores
        self._attendance = attendance
        self._targets = targets
        self._inventory = inventory

    def build_summary(self, *, day: date) -> AdminSummary:
        todays = self._attendance.list_for_date(day)
        counts = {status: 0 for status in LoginStatus}
        for a in todays:
            counts[a.login_status] += 1

        return AdminSummary(
            total_stores=len(self._stores.list_all()),
            active_stores=len({a.store_id for a in todays}),
            early_count=counts[LoginStatus.EARLY],
            ontime_count=counts[LoginStatus.ONTIME],
            late_count=counts[LoginStatus.LATE],
        )

    def build_inventory_sheet(self) -> list[dict]:
        """Rows of the store performance spreadsheet."""
        out: list[dict] = []
        for row in self._inventory.list_all_joined():
            item = row.item
            out.append(
                {
                    "Store": row.store.name if row.store else f"Store ID: {item.store_id}",
                    "Product": row.product.name,
                    "Brand": row.brand.name,
                    "Expected Products": item.opening_stock,
                    "Available Products": item.closing_stock if item.closing_stock is not None else "N/A",
                    "Status": item.reconciliation().label,
                    "Date": item.inventory_date.strftime("%Y-%m-%d"),
                }
            )
        return out

    def build_store_performance(self, *, day: Optional[date] = None) -> Sequence[StorePerformance]:
        """Per-store totals, least unsold stock first.

        Targets are limited to ``day`` when given; inventory covers every line.
        """
        stock: dict[int, list[int]] = {}
        for row in self._inventory.list_all_joined():
            item = row.item
            sold = item.reconciliation().units_sold or 0
            totals = stock.setdefault(item.store_id, [0, 0])
            totals[0] += item.opening_stock
            totals[1] += sold

        quotas: dict[int, list[int]] = {}
        for t in self._targets.list_all():
            if day is not None and t.target_date != day:
                continue
            q = quotas.setdefault(t.store_id, [0, 0, 0, 0])
            q[0] += t.engagement_daily_target
            q[1] += t.engagement_achieved
            q[2] += t.conversation_daily_target
            q[3] += t.conversation_achieved

        out: list[StorePerformance] = []
        for store in self._stores.list_all():
            total_stock, sold = stock.get(store.store_id, [0, 0])
            q = quotas.get(store.store_id, [0, 0, 0, 0])
            out.append(
                StorePerformance(
                    store_id=store.store_id,
                    store_name=store.name,
                    total_stock=total_stock,
                    units_sold=sold,
                    engagement_target=q[0],
                    engagement_achieved=q[1],
                    conversation_target=q[2],
                    conversation_achieved=q[3],
                )
            )

        out.sort(key=lambda p: (p.unsold_stock, p.store_id))
        return out
