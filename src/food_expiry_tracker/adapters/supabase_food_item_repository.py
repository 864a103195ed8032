"""Supabase implementation for food item persistence."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from food_expiry_tracker.domain.food_items import FoodItem, NewFoodItem
from food_expiry_tracker.services.food_items import FoodItemRepository


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase-backed repository for the food_items table."""

    client: Client

    def list_items(self, user_id: UUID) -> list[FoodItem]:
        """Return a user's items ordered by expiry date."""
        response = (
            self.client.table("food_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("expiry_date", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def create_items(self, user_id: UUID, items: list[NewFoodItem]) -> list[FoodItem]:
        """Insert items and return the created rows."""
        rows = [{"user_id": str(user_id), **item.to_row()} for item in items]
        response = self.client.table("food_items").insert(rows).execute()
        if not response.data:
            raise RuntimeError("Failed to create food items")
        return [_parse_item(row) for row in response.data]

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        """Delete a user's item."""
        self.client.table("food_items").delete().eq("id", str(item_id)).eq(
            "user_id", str(user_id)
        ).execute()

    def set_consumed(
        self, user_id: UUID, item_id: UUID, is_consumed: bool
    ) -> FoodItem | None:
        """Update the consumed flag and return the updated item."""
        response = (
            self.client.table("food_items")
            .update({"is_consumed": is_consumed})
            .eq("id", str(item_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])


def _parse_item(row: dict[str, object]) -> FoodItem:
    """Parse a food_items row into a domain model."""
    return FoodItem(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        category=row.get("category"),
        purchase_date=_parse_date(row.get("purchase_date")),
        expiry_date=_parse_date(row.get("expiry_date")),
        quantity=int(row.get("quantity") or 1),
        is_consumed=bool(row.get("is_consumed", False)),
        notes=row.get("notes"),
    )


def _parse_date(raw: object) -> date:
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    return date.min
