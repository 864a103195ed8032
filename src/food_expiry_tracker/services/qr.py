"""QR scan handling."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from food_expiry_tracker.domain.expiry_rules import (
    DEFAULT_EXPIRY_DAYS,
    calculate_expiry_date,
)
from food_expiry_tracker.domain.food_items import (
    DEFAULT_CATEGORY,
    FoodItem,
    NewFoodItem,
)
from food_expiry_tracker.domain.qr import QrProduct, parse_iso_date, parse_qr_payload
from food_expiry_tracker.services.food_items import FoodItemService


class InvalidQrPayloadError(ValueError):
    """Raised when a QR payload carries no product name."""


def qr_to_new_item(
    product: QrProduct,
    today: date | None = None,
    fallback_days: int = DEFAULT_EXPIRY_DAYS,
) -> NewFoodItem:
    """Build an insert payload from parsed QR product data."""
    if not product.name:
        raise InvalidQrPayloadError("QR code does not contain a product name")
    name = f"{product.brand} {product.name}" if product.brand else product.name
    purchase_date = today or date.today()
    expiry_date = parse_iso_date(product.expiry) or calculate_expiry_date(
        name, purchase_date=purchase_date, fallback_days=fallback_days
    )
    notes = f"Manufactured {product.mfg}" if parse_iso_date(product.mfg) else None
    return NewFoodItem(
        name=name,
        category=product.category or DEFAULT_CATEGORY,
        purchase_date=purchase_date,
        expiry_date=expiry_date,
        quantity=product.qty or 1,
        notes=notes,
    )


@dataclass
class QrScanService:
    """Stores items decoded from QR codes."""

    food_item_service: FoodItemService

    def add_from_payload(
        self, user_id: UUID, raw: str, today: date | None = None
    ) -> FoodItem:
        """Parse a decoded QR payload and store the resulting item."""
        product = parse_qr_payload(raw)
        if product is None:
            raise InvalidQrPayloadError("QR code is empty")
        item = qr_to_new_item(
            product,
            today=today,
            fallback_days=self.food_item_service.fallback_days,
        )
        return self.food_item_service.add_items(user_id, [item])[0]
