"""Tests for inventory dashboards and reports."""

from datetime import date, timedelta

from food_expiry_tracker.domain.inventory import (
    CategoryCount,
    InventoryFilters,
    ItemStatus,
    PurchaseWindow,
    SortField,
    StockLevel,
)
from food_expiry_tracker.services.inventory import (
    InventoryService,
    dashboard_stats,
    filter_items,
    health_metrics,
    item_status,
)
from tests.conftest import TEST_USER_ID, InMemoryFoodItemRepository, make_item

TODAY = date(2025, 3, 10)


def _days(offset: int) -> date:
    return TODAY + timedelta(days=offset)


def test_item_status_boundaries() -> None:
    assert item_status(make_item("a", _days(-1)), TODAY) is ItemStatus.EXPIRED
    assert item_status(make_item("b", _days(0)), TODAY) is ItemStatus.EXPIRING
    assert item_status(make_item("c", _days(3)), TODAY) is ItemStatus.EXPIRING
    assert item_status(make_item("d", _days(4)), TODAY) is ItemStatus.FRESH
    assert (
        item_status(make_item("e", _days(-5), is_consumed=True), TODAY)
        is ItemStatus.CONSUMED
    )


def test_dashboard_stats_counts_and_top_categories() -> None:
    items = [
        make_item("Milk", _days(1), category="Dairy"),
        make_item("Curd", _days(-2), category="Dairy"),
        make_item("Apple", _days(10), category="Fruits"),
        make_item("Bread", _days(2), category="Bakery", is_consumed=True),
        make_item("Soap", _days(30), category=None),
    ]

    stats = dashboard_stats(items, TODAY)

    assert stats.total == 5
    assert stats.consumed == 1
    assert stats.expired == 1
    assert stats.expiring_soon == 1
    assert stats.fresh == 2
    assert stats.top_categories == [
        CategoryCount("Dairy", 2),
        CategoryCount("Bakery", 1),
        CategoryCount("Fruits", 1),
        CategoryCount("Other", 1),
    ]


def test_top_categories_limited_to_five() -> None:
    items = [
        make_item(f"item-{index}", _days(10), category=f"Cat{index}")
        for index in range(7)
    ]

    stats = dashboard_stats(items, TODAY)

    assert len(stats.top_categories) == 5


def test_health_metrics() -> None:
    items = [
        make_item("Milk", _days(1), quantity=2),
        make_item("Curd", _days(-2)),
        make_item("Apple", _days(10), quantity=6),
        make_item("Bread", _days(2), is_consumed=True, quantity=9),
    ]

    metrics = health_metrics(items, TODAY)

    # Three unconsumed items, one expired, one expiring.
    assert metrics.expiry_ratio == 67
    assert metrics.value_at_risk == 67
    assert metrics.stock_turnover == 1
    assert metrics.total_quantity == 9


def test_health_metrics_without_active_items() -> None:
    metrics = health_metrics([], TODAY)

    assert metrics.expiry_ratio == 100
    assert metrics.value_at_risk == 0
    assert metrics.stock_turnover == 0
    assert metrics.total_quantity == 0


def test_filter_items_by_query_status_and_stock() -> None:
    items = [
        make_item("Amul Milk", _days(1), quantity=1),
        make_item("Soy milk", _days(20), quantity=4),
        make_item("Paneer", _days(1), quantity=8),
    ]

    by_query = filter_items(items, InventoryFilters(query="MILK"), TODAY)
    expiring = filter_items(items, InventoryFilters(status=ItemStatus.EXPIRING), TODAY)
    medium = filter_items(items, InventoryFilters(stock=StockLevel.MEDIUM), TODAY)
    high = filter_items(items, InventoryFilters(stock=StockLevel.HIGH), TODAY)

    assert [item.name for item in by_query] == ["Amul Milk", "Soy milk"]
    assert [item.name for item in expiring] == ["Amul Milk", "Paneer"]
    assert [item.name for item in medium] == ["Soy milk"]
    assert [item.name for item in high] == ["Paneer"]


def test_filter_items_by_category_and_purchase_window() -> None:
    items = [
        make_item("Milk", _days(2), category="Dairy", purchase_date=_days(-1)),
        make_item("Ghee", _days(20), category="Dairy", purchase_date=_days(-10)),
        make_item("Rice", _days(200), category="Grains", purchase_date=_days(-100)),
    ]

    week = filter_items(
        items, InventoryFilters(purchased_within=PurchaseWindow.WEEK), TODAY
    )
    quarter = filter_items(
        items, InventoryFilters(purchased_within=PurchaseWindow.QUARTER), TODAY
    )
    dairy = filter_items(items, InventoryFilters(category="Dairy"), TODAY)

    assert [item.name for item in week] == ["Milk"]
    assert [item.name for item in quarter] == ["Milk", "Ghee"]
    assert [item.name for item in dairy] == ["Milk", "Ghee"]


def test_filter_items_sorting() -> None:
    items = [
        make_item("banana", _days(5), quantity=3),
        make_item("Apple", _days(-1), quantity=1),
        make_item("carrot", _days(1), quantity=2, is_consumed=True),
    ]

    by_name = filter_items(items, InventoryFilters(sort_field=SortField.NAME), TODAY)
    by_status = filter_items(
        items, InventoryFilters(sort_field=SortField.STATUS), TODAY
    )
    by_quantity_desc = filter_items(
        items,
        InventoryFilters(sort_field=SortField.QUANTITY, descending=True),
        TODAY,
    )
    by_expiry = filter_items(items, InventoryFilters(), TODAY)

    assert [item.name for item in by_name] == ["Apple", "banana", "carrot"]
    assert [item.name for item in by_status] == ["Apple", "banana", "carrot"]
    assert [item.quantity for item in by_quantity_desc] == [3, 2, 1]
    assert [item.name for item in by_expiry] == ["Apple", "carrot", "banana"]


def test_service_reads_only_users_items() -> None:
    repository = InMemoryFoodItemRepository()
    mine = make_item("Milk", _days(1))
    other = make_item("Eggs", _days(1), user_id=mine.id)
    repository.items = {mine.id: mine, other.id: other}
    service = InventoryService(repository)

    stats, metrics = service.get_dashboard(TEST_USER_ID, today=TODAY)
    report = service.get_report(TEST_USER_ID, InventoryFilters(), today=TODAY)

    assert stats.total == 1
    assert metrics.value_at_risk == 100
    assert report == [mine]
