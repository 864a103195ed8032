"""Parsing of decoded QR payloads into product data.

Three payload shapes are accepted, tried in order:

* a JSON object, e.g. ``{"name": "Milk", "expiry": "2025-12-31"}``
* pipe-separated pairs, e.g. ``name=Milk|category=Dairy|qty=2``
* any other non-blank text, used as the product name
"""

import json
from dataclasses import dataclass
from datetime import date

_TEXT_KEYS = ("name", "category", "expiry", "mfg", "brand")


@dataclass(frozen=True)
class QrProduct:
    """Product fields extracted from a QR payload."""

    name: str | None = None
    category: str | None = None
    expiry: str | None = None
    mfg: str | None = None
    qty: int | None = None
    brand: str | None = None


def parse_qr_payload(raw: str) -> QrProduct | None:
    """Parse a decoded QR payload, returning None when nothing is usable."""
    product = _parse_json(raw)
    if product is not None:
        return product
    if "=" in raw:
        product = _parse_pairs(raw)
        if product is not None:
            return product
    if raw.strip():
        return QrProduct(name=raw.strip())
    return None


def parse_iso_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD prefix, returning None for anything else."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def _parse_json(raw: str) -> QrProduct | None:
    try:
        payload = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    fields: dict[str, object] = {}
    for key in _TEXT_KEYS:
        value = payload.get(key)
        if value is not None:
            fields[key] = str(value).strip()
    if "qty" in payload:
        fields["qty"] = _parse_quantity(payload["qty"])
    return QrProduct(**fields)


def _parse_pairs(raw: str) -> QrProduct | None:
    fields: dict[str, object] = {}
    for pair in raw.split("|"):
        key, sep, value = pair.partition("=")
        key = key.strip().lower()
        value = value.strip()
        if not sep or not key or not value:
            continue
        if key == "qty":
            fields["qty"] = _parse_quantity(value)
        elif key in _TEXT_KEYS:
            fields[key] = value
    if not fields:
        return None
    return QrProduct(**fields)


def _parse_quantity(value: object) -> int:
    try:
        quantity = int(str(value).strip())
    except ValueError:
        return 1
    return quantity if quantity > 0 else 1
