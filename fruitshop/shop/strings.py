# fruitshop/shop/strings.py
from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

DEFAULT_LANGUAGE = "en"

# ----------------------------
# Localized strings for prompts and APL.
# Keys ending in "_plural" are picked when count != 1.
# ----------------------------
LANGUAGE_STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "AND": "and",
        "fruit": "fruit",
        "fruit_plural": "fruits",
        "vegetable": "vegetable",
        "vegetable_plural": "vegetables",
        "apple": "apple",
        "apple_plural": "apples",
        "banana": "banana",
        "banana_plural": "bananas",
        "orange": "orange",
        "orange_plural": "oranges",
        "mandarin": "mandarin",
        "mandarin_plural": "mandarins",
        "pineapple": "pineapple",
        "pineapple_plural": "pineapples",
        "tomato": "tomato",
        "tomato_plural": "tomatoes",
        "carrot": "carrot",
        "carrot_plural": "carrots",
        "squash": "squash",
        "squash_plural": "squash",
        "pumpkin": "pumpkin",
        "pumpkin_plural": "pumpkins",
        "lettuce": "lettuce",
        "lettuce_plural": "lettuce",

        "WELCOME_MSG": "Welcome to the fruit shop.",
        "HELP_MSG": (
            "You can add fruits and vegetables to your cart, ask what is in your cart, "
            "or pick a delivery date."
        ),
        "GOODBYE_MSG": "Goodbye.",
        "ACKNOWLEDGE": "OK.",

        # root
        "FRUIT_SHOP_CONTROL_NON_UNDERSTANDING": "I didn't catch that.",

        # category selector
        "CATEGORY_CONTROL_CATEGORY_IDS_VALIDATION_FAIL": "Sorry, I don't know that product category.",
        "CATEGORY_CONTROL_REQUEST_VALUE": "What would you like?",

        # product selector
        "PRODUCT_CONTROL_REQUEST_VALUE_WITH_CATEGORY": "Some of our favorite {category} are {favorites}. Which would you like?",
        "PRODUCT_CONTROL_REQUEST_VALUE_WITHOUT_CATEGORY": "Which product would you like?",
        "PRODUCT_CONTROL_INVALID_VALUE": "Sorry, we don't sell that.",
        "PRODUCT_LIST_APL_TITLE": "Menu",
        "PRODUCT_LIST_APL_SUB_TITLE": "Choose some fruits or vegetables!",

        # count selector
        "ITEM_COUNT_CONTROL_REQUEST_VALUE_WITH_PRODUCT": "How many {itemText}?",
        "ITEM_COUNT_CONTROL_REQUEST_VALUE_WITHOUT_PRODUCT": "How many?",
        "ITEM_COUNT_CONTROL_INVALID_VALUE": "Sorry I can only accept orders of one to one hundred items.",
        "ITEM_COUNT_CONTROL_VALUE_SET": "OK.",
        "ITEM_COUNT_CONTROL_CONFIRM_VALUE": "Was that {value}?",
        "ITEM_COUNT_CONTROL_VALUE_AFFIRMED": "Great.",
        "ITEM_COUNT_CONTROL_VALUE_DISAFFIRMED": "My mistake.",

        # shopping cart
        "SHOPPING_CART_CONTROL_NON_UNDERSTANDING": "I didn't get that.",
        "SHOPPING_CART_CONTROL_ITEM_ADDED": "Added {itemText}.",
        "SHOPPING_CART_CONTROL_ADD_ANOTHER_ITEM": "Would you like to add another item?",
        "SHOPPING_CART_CONTROL_CART_IS_EMPTY": "Your cart is empty.",
        "SHOPPING_CART_CONTROL_TELL_CART_CONTENT": "Your cart contains {content}.",
        "SHOPPING_CART_CONTROL_SHOW_CART_APL_TITLE": "Shopping cart",
        "SHOPPING_CART_CONTROL_SHOW_CART_APL_SUB_TITLE": "Here are the items in your cart",
        "SHOPPING_CART_CONTROL_ITEM_REMOVED": "I removed {itemText} from your cart.",

        # checkout
        "CHECKOUT_CONTROL_REQUEST_VALUE": "When would you like these items delivered?",
        "CHECKOUT_CONTROL_VALUE_SET": "Delivery will be on {date}.",
        "CHECKOUT_CONTROL_INVALID_DATE": "Sorry, I need a specific day for the delivery.",
        "CHECKOUT_CONTROL_DATE_IN_PAST": "Sorry, the earliest delivery date is tomorrow.",
    },
}

Translate = Callable[..., str]


def _tables_for(locale: Optional[str]) -> List[Dict[str, str]]:
    """
    Lookup chain for a locale, most specific first:
      "en-US" -> [en-US, en]
      "fr"    -> [fr, en]   (missing tables are skipped)
    """
    loc = (locale or "").strip().replace("_", "-")
    chain: List[str] = []
    if loc:
        chain.append(loc)
        lang = loc.split("-", 1)[0].lower()
        if lang not in chain:
            chain.append(lang)
    if DEFAULT_LANGUAGE not in chain:
        chain.append(DEFAULT_LANGUAGE)
    return [LANGUAGE_STRINGS[c] for c in chain if c in LANGUAGE_STRINGS]


def t(key: str, locale: Optional[str] = None, count: Optional[int] = None, **params: Any) -> str:
    tables = _tables_for(locale)
    keys = [key]
    if count is not None and count != 1:
        keys.insert(0, f"{key}_plural")

    for k in keys:
        for table in tables:
            if k in table:
                text = table[k]
                return text.format(**params) if params else text

    # unknown keys are spoken as-is rather than crashing the turn
    return key


def translator(locale: Optional[str]) -> Translate:
    def _t(key: str, count: Optional[int] = None, **params: Any) -> str:
        return t(key, locale, count=count, **params)

    return _t


def format_list(items: List[str], conjunction: str = "and") -> str:
    """["a"] -> "a", ["a", "b"] -> "a and b", ["a", "b", "c"] -> "a, b and c"."""
    parts = [str(x) for x in items if x]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    return ", ".join(parts[:-1]) + f" {conjunction} " + parts[-1]
