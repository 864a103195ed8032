"""Pydantic request and response models for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from food_expiry_tracker.domain.food_items import FoodItem
from food_expiry_tracker.domain.inventory import DashboardStats, HealthMetrics
from food_expiry_tracker.domain.notifications import (
    DEFAULT_REMINDER_DAYS,
    NotificationPreferences,
)
from food_expiry_tracker.domain.rot_prediction import (
    Damage,
    Packaging,
    Ripeness,
    RotPrediction,
    StorageConditions,
)


class FoodItemOut(BaseModel):
    """Food item payload."""

    id: UUID
    name: str
    category: str | None
    purchase_date: date
    expiry_date: date
    quantity: int
    is_consumed: bool
    notes: str | None

    @classmethod
    def from_domain(cls, item: FoodItem) -> "FoodItemOut":
        """Build the payload from a domain item."""
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            purchase_date=item.purchase_date,
            expiry_date=item.expiry_date,
            quantity=item.quantity,
            is_consumed=item.is_consumed,
            notes=item.notes,
        )


class ManualItemIn(BaseModel):
    """Manual item entry."""

    name: str
    category: str | None = None
    quantity: int = Field(default=1, ge=1)
    expiry_date: date | None = None
    notes: str | None = None


class QrScanIn(BaseModel):
    """Decoded QR code text."""

    payload: str


class ConsumedIn(BaseModel):
    """Consumed flag update."""

    is_consumed: bool


class StorageConditionsIn(BaseModel):
    """Storage conditions for a produce scan."""

    temperature: float
    humidity: float
    packaging: Packaging
    damage: Damage
    ripeness: Ripeness

    def to_domain(self) -> StorageConditions:
        """Convert to the domain value object."""
        return StorageConditions(
            temperature=self.temperature,
            humidity=self.humidity,
            packaging=self.packaging,
            damage=self.damage,
            ripeness=self.ripeness,
        )


class PredictIn(BaseModel):
    """Produce rot prediction request."""

    produce_key: str
    conditions: StorageConditionsIn


class RotFactorsOut(BaseModel):
    """Impact strings for each storage condition."""

    temperature_impact: str
    humidity_impact: str
    packaging_impact: str
    damage_impact: str
    ripeness_impact: str
    ethylene_note: str


class RotPredictionOut(BaseModel):
    """Rot prediction payload."""

    days_left: int
    rot_date: date
    explanation: str
    factors: RotFactorsOut

    @classmethod
    def from_domain(cls, prediction: RotPrediction) -> "RotPredictionOut":
        """Build the payload from a domain prediction."""
        factors = prediction.factors
        return cls(
            days_left=prediction.days_left,
            rot_date=prediction.rot_date,
            explanation=prediction.explanation,
            factors=RotFactorsOut(
                temperature_impact=factors.temperature_impact,
                humidity_impact=factors.humidity_impact,
                packaging_impact=factors.packaging_impact,
                damage_impact=factors.damage_impact,
                ripeness_impact=factors.ripeness_impact,
                ethylene_note=factors.ethylene_note,
            ),
        )


class ProduceOut(BaseModel):
    """Produce reference entry."""

    key: str
    name: str
    kind: str
    base_shelf_life: int
    optimal_temp: float
    optimal_humidity: float


class ExpiryLookupOut(BaseModel):
    """Rule lookup result for an item name."""

    name: str
    matched: bool
    category: str | None
    days_until_expiry: int
    expiry_date: date


class CategoryCountOut(BaseModel):
    """Category count."""

    category: str
    count: int


class DashboardOut(BaseModel):
    """Dashboard payload."""

    total: int
    consumed: int
    expired: int
    expiring_soon: int
    fresh: int
    top_categories: list[CategoryCountOut]
    expiry_ratio: int
    value_at_risk: int
    stock_turnover: int
    total_quantity: int

    @classmethod
    def from_domain(
        cls, stats: DashboardStats, health: HealthMetrics
    ) -> "DashboardOut":
        """Combine stats and health metrics."""
        return cls(
            total=stats.total,
            consumed=stats.consumed,
            expired=stats.expired,
            expiring_soon=stats.expiring_soon,
            fresh=stats.fresh,
            top_categories=[
                CategoryCountOut(category=entry.category, count=entry.count)
                for entry in stats.top_categories
            ],
            expiry_ratio=health.expiry_ratio,
            value_at_risk=health.value_at_risk,
            stock_turnover=health.stock_turnover,
            total_quantity=health.total_quantity,
        )


class NotificationPreferencesIO(BaseModel):
    """Notification preferences payload."""

    notifications_enabled: bool = False
    telegram_chat_id: int | None = None
    reminder_days: int = Field(default=DEFAULT_REMINDER_DAYS, ge=0)

    @classmethod
    def from_domain(
        cls, preferences: NotificationPreferences
    ) -> "NotificationPreferencesIO":
        """Build the payload from domain preferences."""
        return cls(
            notifications_enabled=preferences.notifications_enabled,
            telegram_chat_id=preferences.telegram_chat_id,
            reminder_days=preferences.reminder_days,
        )

    def to_domain(self) -> NotificationPreferences:
        """Convert to domain preferences."""
        return NotificationPreferences(
            notifications_enabled=self.notifications_enabled,
            telegram_chat_id=self.telegram_chat_id,
            reminder_days=self.reminder_days,
        )


class SavedPredictionOut(BaseModel):
    """Stored produce item with the prediction that set its expiry."""

    item: FoodItemOut
    prediction: RotPredictionOut
