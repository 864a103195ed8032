"""Services for managing a user's tracked food items."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from food_expiry_tracker.domain.expiry_rules import (
    DEFAULT_EXPIRY_DAYS,
    calculate_expiry_date,
    find_rule,
)
from food_expiry_tracker.domain.food_items import (
    DEFAULT_CATEGORY,
    FoodItem,
    NewFoodItem,
)

logger = logging.getLogger(__name__)


class FoodItemRepository(Protocol):
    """Persistence interface for food items."""

    def list_items(self, user_id: UUID) -> list[FoodItem]:
        """Return a user's items ordered by ascending expiry date."""

    def create_items(self, user_id: UUID, items: list[NewFoodItem]) -> list[FoodItem]:
        """Insert items for a user and return the stored rows."""

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete a user's item."""

    def set_consumed(
        self, user_id: UUID, item_id: UUID, is_consumed: bool
    ) -> FoodItem | None:
        """Update the consumed flag, returning the item if it exists."""


@dataclass
class FoodItemService:
    """Application service for food item lifecycle actions."""

    repository: FoodItemRepository
    fallback_days: int = DEFAULT_EXPIRY_DAYS

    def list_items(self, user_id: UUID) -> list[FoodItem]:
        """Return the user's items, soonest expiry first."""
        return self.repository.list_items(user_id)

    def add_items(self, user_id: UUID, items: list[NewFoodItem]) -> list[FoodItem]:
        """Store several items at once."""
        if not items:
            return []
        created = self.repository.create_items(user_id, items)
        logger.info(
            "Stored food items", extra={"user_id": str(user_id), "count": len(created)}
        )
        return created

    def add_manual_item(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        category: str | None = None,
        quantity: int = 1,
        expiry_date: date | None = None,
        notes: str | None = None,
        today: date | None = None,
    ) -> FoodItem:
        """Store a manually entered item, deriving missing fields from rules."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Item name is required")
        if quantity < 1:
            raise ValueError("Quantity must be at least 1")
        purchase_date = today or date.today()
        resolved_category = category.strip() if category else ""
        if not resolved_category:
            rule = find_rule(cleaned)
            resolved_category = rule.category if rule else DEFAULT_CATEGORY
        item = NewFoodItem(
            name=cleaned,
            category=resolved_category,
            purchase_date=purchase_date,
            expiry_date=expiry_date
            or self.expiry_for(cleaned, purchase_date=purchase_date),
            quantity=quantity,
            notes=notes,
        )
        return self.add_items(user_id, [item])[0]

    def expiry_for(self, name: str, purchase_date: date | None = None) -> date:
        """Return the rule-based expiry date using the configured fallback."""
        return calculate_expiry_date(
            name, purchase_date=purchase_date, fallback_days=self.fallback_days
        )

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete an item."""
        self.repository.delete_item(user_id, item_id)

    def set_consumed(
        self, user_id: UUID, item_id: UUID, is_consumed: bool
    ) -> FoodItem | None:
        """Mark an item as consumed or not consumed."""
        return self.repository.set_consumed(user_id, item_id, is_consumed)
