"""Tests for food item service."""

from datetime import date
from uuid import uuid4

import pytest

from food_expiry_tracker.domain.food_items import NewFoodItem
from food_expiry_tracker.services.food_items import FoodItemService
from tests.conftest import TEST_USER_ID, InMemoryFoodItemRepository

TODAY = date(2025, 1, 1)


def test_add_manual_item_derives_category_and_expiry() -> None:
    repository = InMemoryFoodItemRepository()
    service = FoodItemService(repository)

    item = service.add_manual_item(TEST_USER_ID, "  Amul Milk  ", today=TODAY)

    assert item.name == "Amul Milk"
    assert item.category == "Dairy"
    assert item.purchase_date == TODAY
    assert item.expiry_date == date(2025, 1, 4)
    assert item.quantity == 1
    assert not item.is_consumed


def test_add_manual_item_keeps_explicit_values() -> None:
    service = FoodItemService(InMemoryFoodItemRepository())

    item = service.add_manual_item(
        TEST_USER_ID,
        "Milk",
        category="Beverages",
        quantity=4,
        expiry_date=date(2025, 2, 1),
        notes="Almond",
        today=TODAY,
    )

    assert item.category == "Beverages"
    assert item.quantity == 4
    assert item.expiry_date == date(2025, 2, 1)
    assert item.notes == "Almond"


def test_add_manual_item_unknown_name_uses_fallback() -> None:
    service = FoodItemService(InMemoryFoodItemRepository(), fallback_days=5)

    item = service.add_manual_item(TEST_USER_ID, "Dish soap", today=TODAY)

    assert item.category == "Other"
    assert item.expiry_date == date(2025, 1, 6)


@pytest.mark.parametrize(("name", "quantity"), [("   ", 1), ("Milk", 0)])
def test_add_manual_item_rejects_invalid_input(name: str, quantity: int) -> None:
    repository = InMemoryFoodItemRepository()
    service = FoodItemService(repository)

    with pytest.raises(ValueError):
        service.add_manual_item(TEST_USER_ID, name, quantity=quantity)

    assert repository.items == {}


def test_add_items_skips_empty_batch() -> None:
    service = FoodItemService(InMemoryFoodItemRepository())

    assert service.add_items(TEST_USER_ID, []) == []


def test_list_items_orders_by_expiry() -> None:
    service = FoodItemService(InMemoryFoodItemRepository())
    service.add_items(
        TEST_USER_ID,
        [
            NewFoodItem("Ghee", "Dairy", TODAY, date(2025, 1, 31)),
            NewFoodItem("Fish", "Meat", TODAY, date(2025, 1, 2)),
        ],
    )
    service.add_manual_item(uuid4(), "Bread", today=TODAY)

    names = [item.name for item in service.list_items(TEST_USER_ID)]

    assert names == ["Fish", "Ghee"]


def test_set_consumed_and_delete() -> None:
    service = FoodItemService(InMemoryFoodItemRepository())
    item = service.add_manual_item(TEST_USER_ID, "Curd", today=TODAY)

    updated = service.set_consumed(TEST_USER_ID, item.id, True)

    assert updated is not None
    assert updated.is_consumed
    assert service.set_consumed(uuid4(), item.id, False) is None

    service.delete_item(TEST_USER_ID, item.id)

    assert service.list_items(TEST_USER_ID) == []


def test_expiry_for_uses_configured_fallback() -> None:
    service = FoodItemService(InMemoryFoodItemRepository(), fallback_days=3)

    assert service.expiry_for("Xyzzy", purchase_date=TODAY) == date(2025, 1, 4)
    assert service.expiry_for("Milk", purchase_date=TODAY) == date(2025, 1, 4)
