"""Keyword rules mapping item names to a category and shelf life."""

from dataclasses import dataclass
from datetime import date, timedelta

DEFAULT_EXPIRY_DAYS = 7


@dataclass(frozen=True)
class ExpiryRule:
    """Shelf-life rule matched by case-insensitive keyword substrings."""

    keywords: tuple[str, ...]
    days_until_expiry: int
    category: str

    def __post_init__(self) -> None:
        if not self.keywords:
            raise ValueError("Expiry rules need at least one keyword")
        if self.days_until_expiry <= 0:
            raise ValueError("days_until_expiry must be positive")

    def matches(self, text: str) -> bool:
        """Return True when any keyword occurs in the lowercased text."""
        return any(keyword in text for keyword in self.keywords)


# Declaration order is the tie-break: the first matching rule wins.
EXPIRY_RULES: tuple[ExpiryRule, ...] = (
    # Dairy
    ExpiryRule(("milk", "doodh"), 3, "Dairy"),
    ExpiryRule(("curd", "dahi", "yogurt", "yoghurt"), 5, "Dairy"),
    ExpiryRule(("paneer", "cottage cheese"), 3, "Dairy"),
    ExpiryRule(("butter", "ghee"), 30, "Dairy"),
    ExpiryRule(("cheese",), 14, "Dairy"),
    # Vegetables
    ExpiryRule(("tomato", "tamatar"), 5, "Vegetables"),
    ExpiryRule(("potato", "aloo"), 14, "Vegetables"),
    ExpiryRule(("onion", "pyaz"), 14, "Vegetables"),
    ExpiryRule(("carrot", "gajar"), 7, "Vegetables"),
    ExpiryRule(("cabbage", "patta gobi"), 7, "Vegetables"),
    ExpiryRule(("cauliflower", "phool gobi"), 5, "Vegetables"),
    ExpiryRule(("spinach", "palak"), 3, "Vegetables"),
    ExpiryRule(("brinjal", "baingan", "eggplant"), 5, "Vegetables"),
    ExpiryRule(("capsicum", "bell pepper", "shimla mirch"), 5, "Vegetables"),
    # Fruits
    ExpiryRule(("apple", "seb"), 7, "Fruits"),
    ExpiryRule(("banana", "kela"), 3, "Fruits"),
    ExpiryRule(("orange", "santara"), 7, "Fruits"),
    ExpiryRule(("mango", "aam"), 5, "Fruits"),
    ExpiryRule(("grapes", "angoor"), 5, "Fruits"),
    # Meat & fish
    ExpiryRule(("chicken", "murgi"), 2, "Meat"),
    ExpiryRule(("mutton", "lamb", "goat"), 2, "Meat"),
    ExpiryRule(("fish", "machli"), 1, "Meat"),
    ExpiryRule(("prawn", "shrimp", "jhinga"), 1, "Meat"),
    # Bakery
    ExpiryRule(("bread", "pav"), 3, "Bakery"),
    ExpiryRule(("cake",), 3, "Bakery"),
    # Eggs
    ExpiryRule(("egg", "anda"), 14, "Eggs"),
)


def find_rule(
    text: str, rules: tuple[ExpiryRule, ...] = EXPIRY_RULES
) -> ExpiryRule | None:
    """Return the first rule whose keywords occur in the text, if any."""
    lowered = text.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule
    return None


def calculate_expiry_date(
    text: str,
    purchase_date: date | None = None,
    fallback_days: int = DEFAULT_EXPIRY_DAYS,
) -> date:
    """Return the expiry date for an item name bought on purchase_date.

    Items without a matching rule expire after ``fallback_days``.
    """
    start = purchase_date or date.today()
    rule = find_rule(text)
    days = rule.days_until_expiry if rule else fallback_days
    return start + timedelta(days=days)
