"""Domain models for tracked food items."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

DEFAULT_CATEGORY = "Other"


@dataclass(frozen=True)
class FoodItem:
    """A food item stored for a user."""

    id: UUID
    user_id: UUID
    name: str
    category: str | None
    purchase_date: date
    expiry_date: date
    quantity: int
    is_consumed: bool
    notes: str | None

    def days_until_expiry(self, today: date) -> int:
        """Return whole days from today until the expiry date."""
        return (self.expiry_date - today).days


@dataclass(frozen=True)
class NewFoodItem:
    """Insert payload for a food item."""

    name: str
    category: str
    purchase_date: date
    expiry_date: date
    quantity: int = 1
    notes: str | None = None

    def to_row(self) -> dict[str, object]:
        """Return the row payload without the owning user."""
        return {
            "name": self.name,
            "category": self.category,
            "purchase_date": self.purchase_date.isoformat(),
            "expiry_date": self.expiry_date.isoformat(),
            "quantity": self.quantity,
            "notes": self.notes,
        }
