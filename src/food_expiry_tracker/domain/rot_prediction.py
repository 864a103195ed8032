"""Rot prediction for produce under given storage conditions.

Shelf life starts from the produce's base value and is multiplied by one
factor per storage condition. Factors compound on the running value, so a
poor temperature and a poor humidity reduce shelf life multiplicatively.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

from food_expiry_tracker.domain.produce import ProduceInfo, get_produce


class Packaging(StrEnum):
    """How the produce is packed or stored."""

    NONE = "none"
    PLASTIC = "plastic"
    PAPER = "paper"
    SEALED = "sealed"
    REFRIGERATED = "refrigerated"


class Damage(StrEnum):
    """Visible physical damage."""

    NONE = "none"
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"


class Ripeness(StrEnum):
    """Ripeness stage at the time of the scan."""

    UNRIPE = "unripe"
    RIPE = "ripe"
    OVERRIPE = "overripe"


@dataclass(frozen=True)
class StorageConditions:
    """Snapshot of how a piece of produce is stored."""

    temperature: float
    humidity: float
    packaging: Packaging
    damage: Damage
    ripeness: Ripeness


@dataclass(frozen=True)
class RotFactors:
    """Human-readable impact of each storage condition."""

    temperature_impact: str
    humidity_impact: str
    packaging_impact: str
    damage_impact: str
    ripeness_impact: str
    ethylene_note: str


@dataclass(frozen=True)
class RotPrediction:
    """Predicted days until spoilage with its explanation."""

    days_left: int
    rot_date: date
    explanation: str
    factors: RotFactors


class UnknownProduceError(LookupError):
    """Raised when a produce key is not in the reference table."""

    def __init__(self, produce_key: str) -> None:
        super().__init__(f"Unknown produce type: {produce_key!r}")
        self.produce_key = produce_key


@dataclass(frozen=True)
class _Tier:
    max_diff: float
    multiplier: float
    message: str


MIN_DAYS_LEFT = 1

# Tiers are checked in order; max_diff is inclusive.
TEMPERATURE_TIERS: tuple[_Tier, ...] = (
    _Tier(2, 1.0, "Optimal temperature maintained"),
    _Tier(5, 0.85, "Slightly suboptimal temperature (-15% shelf life)"),
    _Tier(
        10, 0.65, "Poor temperature control accelerates decay (-35% shelf life)"
    ),
    _Tier(
        math.inf,
        0.4,
        "Extreme temperature stress causes rapid spoilage (-60% shelf life)",
    ),
)

HUMIDITY_TIERS: tuple[_Tier, ...] = (
    _Tier(5, 1.0, "Ideal humidity level"),
    _Tier(15, 0.9, "Slightly off humidity (-10% shelf life)"),
    _Tier(
        30, 0.75, "Humidity imbalance promotes microbial growth (-25% shelf life)"
    ),
    _Tier(
        math.inf, 0.5, "Extreme humidity causes rapid deterioration (-50% shelf life)"
    ),
)

PACKAGING_FACTORS: dict[Packaging, tuple[float, str]] = {
    Packaging.REFRIGERATED: (
        1.2,
        "Refrigeration extends freshness (+20% shelf life)",
    ),
    Packaging.SEALED: (
        1.1,
        "Sealed packaging reduces air exposure (+10% shelf life)",
    ),
    Packaging.PAPER: (1.0, "Paper allows breathing, neutral impact"),
    Packaging.PLASTIC: (0.95, "Plastic may trap moisture (-5% shelf life)"),
    Packaging.NONE: (
        0.85,
        "No packaging increases air exposure (-15% shelf life)",
    ),
}

DAMAGE_FACTORS: dict[Damage, tuple[float, str]] = {
    Damage.NONE: (1.0, "No physical damage detected"),
    Damage.MINOR: (
        0.8,
        "Minor bruising creates entry points for bacteria (-20% shelf life)",
    ),
    Damage.MODERATE: (
        0.5,
        "Moderate damage accelerates enzymatic browning (-50% shelf life)",
    ),
    Damage.SEVERE: (
        0.25,
        "Severe damage causes rapid microbial invasion (-75% shelf life)",
    ),
}

RIPENESS_FACTORS: dict[Ripeness, tuple[float, str]] = {
    Ripeness.UNRIPE: (1.3, "Unripe produce has longer shelf life (+30%)"),
    Ripeness.RIPE: (1.0, "Ripe produce at peak freshness window"),
    Ripeness.OVERRIPE: (
        0.4,
        "Overripe stage means rapid deterioration (-60% shelf life)",
    ),
}


def predict_rot_date(
    produce_key: str,
    conditions: StorageConditions,
    today: date | None = None,
) -> RotPrediction:
    """Predict when produce stored under the given conditions will spoil."""
    produce = get_produce(produce_key)
    if produce is None:
        raise UnknownProduceError(produce_key)

    shelf_life = float(produce.base_shelf_life)

    multiplier, temperature_impact = _select_tier(
        TEMPERATURE_TIERS, abs(conditions.temperature - produce.optimal_temp)
    )
    shelf_life *= multiplier
    multiplier, humidity_impact = _select_tier(
        HUMIDITY_TIERS, abs(conditions.humidity - produce.optimal_humidity)
    )
    shelf_life *= multiplier
    multiplier, packaging_impact = PACKAGING_FACTORS[Packaging(conditions.packaging)]
    shelf_life *= multiplier
    multiplier, damage_impact = DAMAGE_FACTORS[Damage(conditions.damage)]
    shelf_life *= multiplier
    multiplier, ripeness_impact = RIPENESS_FACTORS[Ripeness(conditions.ripeness)]
    shelf_life *= multiplier

    days_left = max(MIN_DAYS_LEFT, round_half_up(shelf_life))
    rot_date = (today or date.today()) + timedelta(days=days_left)

    factors = RotFactors(
        temperature_impact=temperature_impact,
        humidity_impact=humidity_impact,
        packaging_impact=packaging_impact,
        damage_impact=damage_impact,
        ripeness_impact=ripeness_impact,
        ethylene_note=ethylene_note(produce),
    )
    return RotPrediction(
        days_left=days_left,
        rot_date=rot_date,
        explanation=_explain(produce, days_left, factors),
        factors=factors,
    )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


def ethylene_note(produce: ProduceInfo) -> str:
    """Describe how the produce interacts with ethylene gas."""
    if produce.ethylene_producer:
        return (
            f"{produce.name} produces ethylene gas which speeds ripening "
            "of nearby produce"
        )
    if produce.ethylene_sensitive:
        return (
            f"{produce.name} is sensitive to ethylene - keep away from bananas, "
            "apples, and tomatoes"
        )
    return f"{produce.name} has low ethylene interaction"


def _select_tier(tiers: tuple[_Tier, ...], diff: float) -> tuple[float, str]:
    for tier in tiers:
        if diff <= tier.max_diff:
            return tier.multiplier, tier.message
    # Only NaN falls through every comparison.
    last = tiers[-1]
    return last.multiplier, last.message


def _explain(produce: ProduceInfo, days_left: int, factors: RotFactors) -> str:
    parts = [
        (
            f"Based on {produce.name}'s natural shelf life of "
            f"{produce.base_shelf_life} days under optimal conditions "
            f"({produce.optimal_temp:g}°C, {produce.optimal_humidity:g}% humidity), "
            "your current storage conditions predict approximately "
            f"{days_left} days until spoilage."
        ),
        (
            f"Key factors: {factors.temperature_impact}. "
            f"{factors.humidity_impact}. {factors.damage_impact}."
        ),
    ]
    if produce.ethylene_producer:
        parts.append("This produce emits ethylene, accelerating ripening.")
    parts.append(
        "Microbial growth rate increases with temperature deviation "
        "and physical damage."
    )
    return " ".join(parts)
