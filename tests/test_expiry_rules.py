"""Tests for keyword expiry rules."""

from datetime import date, timedelta

import pytest

from food_expiry_tracker.domain.expiry_rules import (
    DEFAULT_EXPIRY_DAYS,
    EXPIRY_RULES,
    ExpiryRule,
    calculate_expiry_date,
    find_rule,
)


def test_find_rule_matches_hindi_keyword() -> None:
    rule = find_rule("Fresh Aloo 1kg")

    assert rule is not None
    assert rule.category == "Vegetables"
    assert rule.days_until_expiry == 14
    assert "potato" in rule.keywords


def test_find_rule_is_case_insensitive() -> None:
    rule = find_rule("AMUL MILK 500ML")

    assert rule is not None
    assert rule.category == "Dairy"
    assert rule.days_until_expiry == 3


def test_find_rule_returns_none_without_match() -> None:
    assert find_rule("Dish soap") is None
    assert find_rule("") is None


def test_find_rule_prefers_earlier_rule() -> None:
    # "cottage cheese" is declared before the generic "cheese" rule.
    rule = find_rule("Cottage cheese 200g")

    assert rule is not None
    assert rule.days_until_expiry == 3

    # "milk" (Dairy) is declared before "chicken" (Meat).
    both = find_rule("chicken in milk gravy")
    assert both is not None
    assert both.category == "Dairy"


def test_eggplant_resolves_to_vegetable_not_egg() -> None:
    rule = find_rule("Eggplant")

    assert rule is not None
    assert rule.category == "Vegetables"


def test_calculate_expiry_date_uses_rule_days() -> None:
    assert calculate_expiry_date("Milk", purchase_date=date(2025, 1, 1)) == date(
        2025, 1, 4
    )


def test_calculate_expiry_date_falls_back_to_seven_days() -> None:
    result = calculate_expiry_date("Xyzzy unknown item", purchase_date=date(2025, 1, 1))

    assert result == date(2025, 1, 8)
    assert DEFAULT_EXPIRY_DAYS == 7


def test_calculate_expiry_date_rolls_over_year() -> None:
    assert calculate_expiry_date("ghee", purchase_date=date(2024, 12, 20)) == date(
        2025, 1, 19
    )


def test_calculate_expiry_date_handles_leap_day() -> None:
    assert calculate_expiry_date("curd", purchase_date=date(2024, 2, 26)) == date(
        2024, 3, 2
    )


def test_calculate_expiry_date_custom_fallback() -> None:
    result = calculate_expiry_date(
        "mystery", purchase_date=date(2025, 3, 1), fallback_days=10
    )

    assert result == date(2025, 3, 11)


def test_calculate_expiry_date_defaults_to_today() -> None:
    assert calculate_expiry_date("bread") == date.today() + timedelta(days=3)


def test_rule_table_has_non_empty_keywords() -> None:
    assert all(rule.keywords for rule in EXPIRY_RULES)
    assert all(rule.days_until_expiry > 0 for rule in EXPIRY_RULES)


def test_rule_rejects_empty_keywords() -> None:
    with pytest.raises(ValueError):
        ExpiryRule((), 3, "Dairy")
