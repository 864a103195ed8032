"""Models for receipt OCR results."""

from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel


class OcrResult(BaseModel):
    """Structured output returned by the OCR model."""

    lines: list[str]


@dataclass(frozen=True)
class ScannedItem:
    """A perishable item recognised on a receipt line."""

    name: str
    category: str
    expiry_date: date
