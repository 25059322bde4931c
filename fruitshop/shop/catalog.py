# fruitshop/shop/catalog.py
from __future__ import annotations

from typing import Dict, List, Optional

# Slot value ids. They happen to be singular English words; spoken text comes from strings.py.
CATEGORY_IDS: List[str] = ["fruit", "vegetable"]
FRUIT_IDS: List[str] = ["apple", "banana", "orange", "mandarin", "pineapple"]
VEGETABLE_IDS: List[str] = ["tomato", "carrot", "squash", "pumpkin", "lettuce"]

PRODUCTS_BY_CATEGORY: Dict[str, List[str]] = {
    "fruit": FRUIT_IDS,
    "vegetable": VEGETABLE_IDS,
}

MIN_COUNT = 1
MAX_COUNT = 100
CONFIRM_COUNT_FROM = 10

# How many products are read out when suggesting favorites for a category.
FAVORITES_PAGE_SIZE = 3


def _norm(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def is_category(value: Optional[str]) -> bool:
    return _norm(value) in PRODUCTS_BY_CATEGORY


def is_product(value: Optional[str]) -> bool:
    return category_for_product(value) is not None


def products_in_category(category: str) -> List[str]:
    cid = _norm(category)
    if cid not in PRODUCTS_BY_CATEGORY:
        raise ValueError(f"unknown category: {category!r}")
    return list(PRODUCTS_BY_CATEGORY[cid])


def category_for_product(product_id: Optional[str]) -> Optional[str]:
    pid = _norm(product_id)
    if not pid:
        return None
    for cid, products in PRODUCTS_BY_CATEGORY.items():
        if pid in products:
            return cid
    return None


def favorites(category: str) -> List[str]:
    return products_in_category(category)[:FAVORITES_PAGE_SIZE]


def count_problem(count: int) -> Optional[str]:
    """Reason code for an unacceptable count, or None when the count is fine."""
    if count < MIN_COUNT:
        return "NEGATIVE"
    if count > MAX_COUNT:
        return "TOO_LARGE"
    return None


def count_needs_confirmation(count: int) -> bool:
    return count >= CONFIRM_COUNT_FROM
