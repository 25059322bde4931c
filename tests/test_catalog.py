# tests/test_catalog.py
from __future__ import annotations

import pytest

from fruitshop.shop import catalog


def test_every_product_has_exactly_one_category():
    for pid in catalog.FRUIT_IDS:
        assert catalog.category_for_product(pid) == "fruit"
    for pid in catalog.VEGETABLE_IDS:
        assert catalog.category_for_product(pid) == "vegetable"
    assert not set(catalog.FRUIT_IDS) & set(catalog.VEGETABLE_IDS)


def test_lookups_ignore_case_and_spaces():
    assert catalog.is_category(" Fruit ")
    assert catalog.is_product("APPLE")
    assert catalog.category_for_product(" Carrot") == "vegetable"


def test_unknown_values():
    assert not catalog.is_category("meat")
    assert not catalog.is_category(None)
    assert not catalog.is_product("")
    assert catalog.category_for_product("steak") is None


def test_products_in_unknown_category_raises():
    with pytest.raises(ValueError):
        catalog.products_in_category("meat")


def test_products_in_category_returns_a_copy():
    products = catalog.products_in_category("fruit")
    products.append("durian")
    assert "durian" not in catalog.FRUIT_IDS


def test_favorites_are_the_first_products():
    assert catalog.favorites("fruit") == ["apple", "banana", "orange"]
    assert catalog.favorites("vegetable") == ["tomato", "carrot", "squash"]


@pytest.mark.parametrize(
    "count, problem",
    [(-3, "NEGATIVE"), (0, "NEGATIVE"), (1, None), (100, None), (101, "TOO_LARGE")],
)
def test_count_problem(count, problem):
    assert catalog.count_problem(count) == problem


def test_large_counts_need_confirmation():
    assert not catalog.count_needs_confirmation(9)
    assert catalog.count_needs_confirmation(10)
    assert catalog.count_needs_confirmation(100)
