"""Domain models for inventory dashboards."""

from dataclasses import dataclass
from enum import StrEnum


class ItemStatus(StrEnum):
    """Freshness status of a food item."""

    EXPIRED = "expired"
    EXPIRING = "expiring"
    FRESH = "fresh"
    CONSUMED = "consumed"


class StockLevel(StrEnum):
    """Quantity bands used by the inventory report."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PurchaseWindow(StrEnum):
    """How recently an item was bought."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"


class SortField(StrEnum):
    """Fields the inventory report can be sorted by."""

    NAME = "name"
    CATEGORY = "category"
    STATUS = "status"
    QUANTITY = "quantity"
    PURCHASE_DATE = "purchase_date"
    EXPIRY_DATE = "expiry_date"


@dataclass(frozen=True)
class CategoryCount:
    """Number of items in a category."""

    category: str
    count: int


@dataclass(frozen=True)
class DashboardStats:
    """Headline counts for the dashboard."""

    total: int
    consumed: int
    expired: int
    expiring_soon: int
    fresh: int
    top_categories: list[CategoryCount]


@dataclass(frozen=True)
class HealthMetrics:
    """Inventory health percentages and counters."""

    expiry_ratio: int
    value_at_risk: int
    stock_turnover: int
    total_quantity: int


@dataclass(frozen=True)
class InventoryFilters:
    """Filters and ordering for the inventory report."""

    query: str | None = None
    status: ItemStatus | None = None
    category: str | None = None
    stock: StockLevel | None = None
    purchased_within: PurchaseWindow | None = None
    sort_field: SortField = SortField.EXPIRY_DATE
    descending: bool = False
