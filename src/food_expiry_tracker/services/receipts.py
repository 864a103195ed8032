"""Receipt scanning: OCR the image, then match lines against expiry rules."""

import base64
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from food_expiry_tracker.domain.expiry_rules import (
    DEFAULT_EXPIRY_DAYS,
    calculate_expiry_date,
    find_rule,
)
from food_expiry_tracker.domain.food_items import NewFoodItem
from food_expiry_tracker.domain.receipts import OcrResult, ScannedItem

OCR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "lines": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["lines"],
    "additionalProperties": False,
}

OCR_PROMPT = (
    "Transcribe this grocery receipt. "
    "Return every printed line as a separate string, top to bottom, "
    "without correcting spelling."
)


class OcrClient(Protocol):
    """Interface for extracting text lines from an image."""

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured OCR data."""


@dataclass
class ReceiptService:
    """Service that turns receipt photos into perishable items."""

    client: OcrClient
    model: str
    fallback_days: int = DEFAULT_EXPIRY_DAYS

    async def scan(
        self, image_bytes: bytes, purchase_date: date | None = None
    ) -> list[ScannedItem]:
        """OCR a receipt image and return the recognised perishables."""
        raw = await self.client.extract(
            model=self.model,
            image_data_url=_to_data_url(image_bytes),
            schema=OCR_SCHEMA,
            prompt=OCR_PROMPT,
        )
        result = OcrResult.model_validate(raw)
        return self.items_from_lines(result.lines, purchase_date)

    def items_from_text(
        self, text: str, purchase_date: date | None = None
    ) -> list[ScannedItem]:
        """Parse newline-separated receipt text."""
        return self.items_from_lines(text.splitlines(), purchase_date)

    def items_from_lines(
        self, lines: list[str], purchase_date: date | None = None
    ) -> list[ScannedItem]:
        """Match each non-blank line against the expiry rules."""
        items: list[ScannedItem] = []
        for line in lines:
            name = line.strip()
            if not name:
                continue
            rule = find_rule(name)
            if rule is None:
                continue
            items.append(
                ScannedItem(
                    name=name,
                    category=rule.category,
                    expiry_date=calculate_expiry_date(
                        name,
                        purchase_date=purchase_date,
                        fallback_days=self.fallback_days,
                    ),
                )
            )
        return items


def to_new_items(
    scanned: list[ScannedItem], purchase_date: date | None = None
) -> list[NewFoodItem]:
    """Convert scanned receipt items into insert payloads."""
    bought = purchase_date or date.today()
    return [
        NewFoodItem(
            name=item.name,
            category=item.category,
            purchase_date=bought,
            expiry_date=item.expiry_date,
        )
        for item in scanned
    ]


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
