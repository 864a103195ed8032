"""Inventory dashboards and reports."""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from food_expiry_tracker.domain.food_items import DEFAULT_CATEGORY, FoodItem
from food_expiry_tracker.domain.inventory import (
    CategoryCount,
    DashboardStats,
    HealthMetrics,
    InventoryFilters,
    ItemStatus,
    PurchaseWindow,
    SortField,
    StockLevel,
)
from food_expiry_tracker.services.food_items import FoodItemRepository

EXPIRING_SOON_DAYS = 3
TOP_CATEGORY_LIMIT = 5
LOW_STOCK_MAX = 2
MEDIUM_STOCK_MAX = 5

PURCHASE_WINDOW_DAYS: dict[PurchaseWindow, int] = {
    PurchaseWindow.WEEK: 7,
    PurchaseWindow.MONTH: 30,
    PurchaseWindow.QUARTER: 90,
}

STATUS_PRIORITY: dict[ItemStatus, int] = {
    ItemStatus.EXPIRED: 1,
    ItemStatus.EXPIRING: 2,
    ItemStatus.FRESH: 3,
    ItemStatus.CONSUMED: 4,
}


@dataclass
class InventoryService:
    """Service for inventory dashboards."""

    repository: FoodItemRepository

    def get_dashboard(
        self, user_id: UUID, today: date | None = None
    ) -> tuple[DashboardStats, HealthMetrics]:
        """Return headline stats and health metrics for a user."""
        items = self.repository.list_items(user_id)
        day = today or date.today()
        return dashboard_stats(items, day), health_metrics(items, day)

    def get_report(
        self, user_id: UUID, filters: InventoryFilters, today: date | None = None
    ) -> list[FoodItem]:
        """Return the user's items filtered and sorted."""
        items = self.repository.list_items(user_id)
        return filter_items(items, filters, today or date.today())


def item_status(item: FoodItem, today: date) -> ItemStatus:
    """Classify an item by consumption and days to expiry."""
    if item.is_consumed:
        return ItemStatus.CONSUMED
    days = item.days_until_expiry(today)
    if days < 0:
        return ItemStatus.EXPIRED
    if days <= EXPIRING_SOON_DAYS:
        return ItemStatus.EXPIRING
    return ItemStatus.FRESH


def dashboard_stats(items: list[FoodItem], today: date) -> DashboardStats:
    """Count items per status and the most common categories."""
    statuses = Counter(item_status(item, today) for item in items)
    categories = Counter(item.category or DEFAULT_CATEGORY for item in items)
    top = sorted(categories.items(), key=lambda entry: (-entry[1], entry[0]))
    return DashboardStats(
        total=len(items),
        consumed=statuses[ItemStatus.CONSUMED],
        expired=statuses[ItemStatus.EXPIRED],
        expiring_soon=statuses[ItemStatus.EXPIRING],
        fresh=statuses[ItemStatus.FRESH],
        top_categories=[
            CategoryCount(category=name, count=count)
            for name, count in top[:TOP_CATEGORY_LIMIT]
        ],
    )


def health_metrics(items: list[FoodItem], today: date) -> HealthMetrics:
    """Compute expiry ratio and value at risk over unconsumed items."""
    active = [item for item in items if not item.is_consumed]
    statuses = Counter(item_status(item, today) for item in active)
    expired = statuses[ItemStatus.EXPIRED]
    expiring = statuses[ItemStatus.EXPIRING]
    if active:
        expiry_ratio = round((len(active) - expired) / len(active) * 100)
        value_at_risk = round((expired + expiring) / len(active) * 100)
    else:
        expiry_ratio = 100
        value_at_risk = 0
    return HealthMetrics(
        expiry_ratio=expiry_ratio,
        value_at_risk=value_at_risk,
        stock_turnover=len(items) - len(active),
        total_quantity=sum(item.quantity for item in active),
    )


def filter_items(
    items: list[FoodItem], filters: InventoryFilters, today: date
) -> list[FoodItem]:
    """Apply report filters, then sort."""
    result = [item for item in items if _matches(item, filters, today)]
    return sorted(
        result,
        key=lambda item: _sort_key(item, filters.sort_field, today),
        reverse=filters.descending,
    )


def _matches(item: FoodItem, filters: InventoryFilters, today: date) -> bool:
    if filters.query and filters.query.lower() not in item.name.lower():
        return False
    if filters.status and item_status(item, today) != filters.status:
        return False
    if filters.category and item.category != filters.category:
        return False
    if filters.stock and _stock_level(item.quantity) != filters.stock:
        return False
    if filters.purchased_within:
        age = (today - item.purchase_date).days
        if age > PURCHASE_WINDOW_DAYS[filters.purchased_within]:
            return False
    return True


def _stock_level(quantity: int) -> StockLevel:
    if quantity <= LOW_STOCK_MAX:
        return StockLevel.LOW
    if quantity <= MEDIUM_STOCK_MAX:
        return StockLevel.MEDIUM
    return StockLevel.HIGH


def _sort_key(item: FoodItem, field: SortField, today: date) -> object:
    if field is SortField.NAME:
        return item.name.lower()
    if field is SortField.CATEGORY:
        return (item.category or "").lower()
    if field is SortField.STATUS:
        return STATUS_PRIORITY[item_status(item, today)]
    if field is SortField.QUANTITY:
        return item.quantity
    if field is SortField.PURCHASE_DATE:
        return item.purchase_date
    return item.expiry_date
