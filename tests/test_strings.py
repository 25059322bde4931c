# tests/test_strings.py
from __future__ import annotations

from fruitshop.shop.strings import format_list, t, translator


def test_plural_form_is_used_for_counts_other_than_one():
    assert t("apple", count=1) == "apple"
    assert t("apple", count=2) == "apples"
    assert t("apple", count=0) == "apples"
    assert t("squash", count=5) == "squash"


def test_no_plural_form_falls_back_to_singular():
    assert t("ACKNOWLEDGE", count=3) == "OK."


def test_parameters_are_substituted():
    assert t("ITEM_COUNT_CONTROL_CONFIRM_VALUE", value=12) == "Was that 12?"
    assert t("CHECKOUT_CONTROL_VALUE_SET", date="2019-01-08") == "Delivery will be on 2019-01-08."


def test_unknown_locale_falls_back_to_english():
    assert t("WELCOME_MSG", "newLocale") == "Welcome to the fruit shop."
    assert t("WELCOME_MSG", "en-GB") == "Welcome to the fruit shop."
    assert t("WELCOME_MSG", "en_AU") == "Welcome to the fruit shop."


def test_unknown_key_is_returned_as_is():
    assert t("NO_SUCH_KEY") == "NO_SUCH_KEY"


def test_translator_binds_locale():
    tr = translator("en-US")
    assert tr("carrot", count=2) == "carrots"
    assert tr("SHOPPING_CART_CONTROL_ITEM_ADDED", itemText="2 carrots") == "Added 2 carrots."


def test_format_list():
    assert format_list([]) == ""
    assert format_list(["apples"]) == "apples"
    assert format_list(["apples", "bananas"]) == "apples and bananas"
    assert format_list(["apples", "bananas", "oranges"]) == "apples, bananas and oranges"
    assert format_list(["a", "", "b"], "or") == "a or b"
