"""Tests for tag, date, size and quantity extraction."""

from __future__ import annotations

from datetime import date

import pytest

from frostie.models.item import Period
from frostie.parsing.extractor import extract, extract_tags, parse_absolute_date
from frostie.parsing.rules import DATE_PATTERNS, apply_first


def test_extracts_word_quantity_container_and_period():
    result = extract("Two bags of frozen peas, expires in 2 weeks")

    assert result.name == "frozen peas"
    assert result.quantity == 2
    assert result.explicit_period == Period(amount=2, unit="week")
    assert result.explicit_date is None
    assert result.tags == []


def test_extracts_tags_in_order_and_strips_them():
    result = extract("#homemade #soup Tomato sauce good for 3 months")

    assert result.tags == ["homemade", "soup"]
    assert result.name == "Tomato sauce"
    assert result.explicit_period == Period(amount=3, unit="month")


def test_tag_extraction_is_idempotent():
    tags, residual = extract_tags("#dinner Beef stew #batch #dinner")

    assert tags == ["dinner", "batch"]
    again, same = extract_tags(residual)
    assert again == []
    assert same == residual == "Beef stew"


def test_extracts_size_before_quantity():
    result = extract("Chicken breast 500g")

    assert result.size == "500g"
    assert result.name == "Chicken breast"
    assert result.quantity == 1


def test_absolute_date_is_captured_even_when_in_the_past():
    result = extract("3 of frozen pizza expire: 01/05/23")

    assert result.explicit_date == date(2023, 1, 5)
    assert result.quantity == 3
    assert result.name == "frozen pizza"


def test_invalid_absolute_date_is_removed_but_not_captured():
    result = extract("Ground beef expires: 13/45/2024")

    assert result.explicit_date is None
    assert result.explicit_period is None
    assert result.name == "Ground beef"


def test_only_first_date_expression_is_extracted():
    result = extract("Lasagna good for 2 months in 3 days")

    assert result.explicit_period == Period(amount=2, unit="month")
    assert "in 3 days" in result.name


def test_in_pattern_requires_word_boundary():
    result = extract("Protein bars within 5 days")

    assert result.explicit_period is None
    assert result.name == "Protein bars within 5 days"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Soup for ten days", Period(amount=10, unit="day")),
        ("Bread good for One week", Period(amount=1, unit="week")),
        ("Stock EXPIRES IN 4 MONTHS", Period(amount=4, unit="month")),
        ("Berries in 6 weeks", Period(amount=6, unit="week")),
    ],
)
def test_period_forms(text: str, expected: Period):
    assert extract(text).explicit_period == expected


@pytest.mark.parametrize(
    ("text", "size", "name"),
    [
        ("Ground beef 2 lbs", "2 lbs", "Ground beef"),
        ("Milk 16 fl oz", "16 fl oz", "Milk"),
        ("Shrimp 1.5 kg bag", "1.5 kg", "Shrimp bag"),
        ("Butter 250 grams", "250 grams", "Butter"),
        ("2 green apples", "", "green apples"),
    ],
)
def test_size_forms(text: str, size: str, name: str):
    result = extract(text)

    assert result.size == size
    assert result.name == name


@pytest.mark.parametrize(
    ("text", "quantity", "name"),
    [
        ("4 chicken thighs", 4, "chicken thighs"),
        ("three of bagels", 3, "bagels"),
        ("2 boxes of waffles", 2, "waffles"),
        ("0 muffins", 1, "muffins"),
        ("of peas", 1, "peas"),
        ("Pork chops", 1, "Pork chops"),
    ],
)
def test_quantity_forms(text: str, quantity: int, name: str):
    result = extract(text)

    assert result.quantity == quantity
    assert result.name == name


def test_empty_input_yields_defaults():
    result = extract("")

    assert result.name == ""
    assert result.quantity == 1
    assert result.size == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("10/15/2025", date(2025, 10, 15)),
        ("1-2-26", date(2026, 1, 2)),
        ("02/30/2025", None),
        ("2025/01", None),
    ],
)
def test_parse_absolute_date(value: str, expected):
    assert parse_absolute_date(value) == expected


def test_date_patterns_are_ordered_explicit_date_first():
    kinds = [pattern.kind for pattern in DATE_PATTERNS]

    assert kinds[0] == "explicit-date"
    assert set(kinds[1:]) == {"relative-period"}


def test_apply_first_returns_none_without_match():
    assert apply_first((), "anything") is None
