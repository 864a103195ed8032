"""Produce reference data used by the rot predictor."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ProduceInfo:
    """Storage profile for a fruit or vegetable."""

    name: str
    base_shelf_life: int
    optimal_temp: float
    optimal_humidity: float
    ethylene_producer: bool
    ethylene_sensitive: bool
    kind: str


def _fruit(  # noqa: PLR0913
    name: str,
    base_shelf_life: int,
    optimal_temp: float,
    optimal_humidity: float,
    *,
    producer: bool,
    sensitive: bool,
) -> ProduceInfo:
    return ProduceInfo(
        name=name,
        base_shelf_life=base_shelf_life,
        optimal_temp=optimal_temp,
        optimal_humidity=optimal_humidity,
        ethylene_producer=producer,
        ethylene_sensitive=sensitive,
        kind="Fruits",
    )


def _vegetable(  # noqa: PLR0913
    name: str,
    base_shelf_life: int,
    optimal_temp: float,
    optimal_humidity: float,
    *,
    producer: bool,
    sensitive: bool,
) -> ProduceInfo:
    return ProduceInfo(
        name=name,
        base_shelf_life=base_shelf_life,
        optimal_temp=optimal_temp,
        optimal_humidity=optimal_humidity,
        ethylene_producer=producer,
        ethylene_sensitive=sensitive,
        kind="Vegetables",
    )


PRODUCE_DATABASE: Mapping[str, ProduceInfo] = MappingProxyType(
    {
        # Fruits
        "apple": _fruit("Apple", 30, 1, 90, producer=True, sensitive=False),
        "banana": _fruit("Banana", 7, 13, 90, producer=True, sensitive=True),
        "orange": _fruit("Orange", 21, 4, 90, producer=False, sensitive=False),
        "mango": _fruit("Mango", 10, 13, 90, producer=True, sensitive=True),
        "grapes": _fruit("Grapes", 14, 0, 90, producer=False, sensitive=True),
        "strawberry": _fruit("Strawberry", 5, 0, 95, producer=False, sensitive=True),
        "watermelon": _fruit("Watermelon", 14, 10, 85, producer=False, sensitive=True),
        "papaya": _fruit("Papaya", 7, 10, 90, producer=True, sensitive=True),
        "pineapple": _fruit("Pineapple", 5, 7, 90, producer=False, sensitive=False),
        "avocado": _fruit("Avocado", 7, 7, 90, producer=True, sensitive=True),
        "pear": _fruit("Pear", 14, -1, 92, producer=True, sensitive=True),
        # Vegetables
        "tomato": _vegetable("Tomato", 7, 13, 90, producer=True, sensitive=True),
        "potato": _vegetable("Potato", 30, 7, 95, producer=False, sensitive=True),
        "onion": _vegetable("Onion", 30, 0, 65, producer=False, sensitive=False),
        "carrot": _vegetable("Carrot", 21, 0, 98, producer=False, sensitive=True),
        "spinach": _vegetable("Spinach", 7, 0, 95, producer=False, sensitive=True),
        "broccoli": _vegetable("Broccoli", 14, 0, 95, producer=False, sensitive=True),
        "cucumber": _vegetable("Cucumber", 10, 10, 95, producer=False, sensitive=True),
        "capsicum": _vegetable("Capsicum", 14, 7, 95, producer=False, sensitive=True),
        "cabbage": _vegetable("Cabbage", 21, 0, 98, producer=False, sensitive=True),
        "cauliflower": _vegetable(
            "Cauliflower", 14, 0, 95, producer=False, sensitive=True
        ),
        "lettuce": _vegetable("Lettuce", 7, 0, 98, producer=False, sensitive=True),
        "eggplant": _vegetable("Eggplant", 7, 10, 90, producer=False, sensitive=True),
    }
)


def get_produce(produce_key: str) -> ProduceInfo | None:
    """Return produce info for a key, if present."""
    return PRODUCE_DATABASE.get(produce_key)


def list_produce() -> list[tuple[str, ProduceInfo]]:
    """Return produce entries in table order."""
    return list(PRODUCE_DATABASE.items())
