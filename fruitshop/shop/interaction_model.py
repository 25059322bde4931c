# fruitshop/shop/interaction_model.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .catalog import CATEGORY_IDS, FRUIT_IDS, VEGETABLE_IDS
from .dialog import (
    ADD_ITEM_INTENT,
    ADD_PRODUCT_INTENT,
    CHECK_CART_INTENT,
    SELECT_CATEGORY_INTENT,
    SELECT_PRODUCT_INTENT,
    SET_COUNT_INTENT,
    SET_DELIVERY_DATE_INTENT,
)
from .strings import t

INVOCATION_NAME = "fruit shop"

BUILT_IN_INTENTS: List[str] = [
    "AMAZON.StopIntent",
    "AMAZON.NavigateHomeIntent",
    "AMAZON.HelpIntent",
    "AMAZON.CancelIntent",
    "AMAZON.MoreIntent",
    "AMAZON.NavigateSettingsIntent",
    "AMAZON.PageUpIntent",
    "AMAZON.PageDownIntent",
    "AMAZON.PreviousIntent",
    "AMAZON.ScrollRightIntent",
    "AMAZON.ScrollDownIntent",
    "AMAZON.ScrollLeftIntent",
    "AMAZON.ScrollUpIntent",
    "AMAZON.FallbackIntent",
    "AMAZON.YesIntent",
    "AMAZON.NoIntent",
]

# Extra spoken forms beyond the singular/plural from strings.py.
# "oranges" is shared on purpose: mandarins are often called oranges.
_EXTRA_SYNONYMS: Dict[str, List[str]] = {
    "vegetable": ["veges", "veggies", "veg"],
    "mandarin": ["oranges"],
    "squash": ["squashes"],
    "lettuce": ["lettuces"],
}

_CART_SYNONYMS = [
    "the cart", "my cart", "shopping cart", "the shopping cart", "my shopping cart",
    "bag", "the bag", "my bag", "shopping bag", "the shopping bag", "my shopping bag",
    "list", "the list", "my list", "shopping list", "the shopping list", "my shopping list",
]


def _slot(name: str, type_: str, multi: bool = False) -> Dict[str, Any]:
    s: Dict[str, Any] = {"name": name, "type": type_}
    if multi:
        s["multipleValues"] = {"enabled": True}
    return s


def _value(vid: str, synonyms: Optional[List[str]] = None) -> Dict[str, Any]:
    return {"id": vid, "name": {"value": vid, "synonyms": list(synonyms or [])}}


def _catalog_values(ids: List[str], locale: str) -> List[Dict[str, Any]]:
    out = []
    for vid in ids:
        syns: List[str] = []
        plural = t(vid, locale, count=0)
        if plural != vid:
            syns.append(plural)
        for extra in _EXTRA_SYNONYMS.get(vid, []):
            if extra not in syns:
                syns.append(extra)
        out.append(_value(vid, syns))
    return out


def _intents() -> List[Dict[str, Any]]:
    intents: List[Dict[str, Any]] = [{"name": n, "samples": []} for n in BUILT_IN_INTENTS]
    intents += [
        {
            "name": CHECK_CART_INTENT,
            "slots": [_slot("cart", "cart")],
            "samples": [
                "what items do I have",
                "what is in {cart}",
                "what's in {cart}",
                "review",
                "check {cart}",
                "check {cart} items",
                "review {cart}",
            ],
        },
        {
            "name": ADD_ITEM_INTENT,
            "slots": [
                _slot("action", "action"),
                _slot("product", "Product"),
                _slot("count", "AMAZON.NUMBER"),
                _slot("cart", "cart"),
            ],
            "samples": [
                "{action} {count} {product}",
                "{action} {count} {product} to {cart}",
                "{action} {count} {product} in {cart}",
                "{count} {product}",
            ],
        },
        {
            "name": ADD_PRODUCT_INTENT,
            "slots": [
                _slot("action", "action"),
                _slot("product", "Product", multi=True),
                _slot("preposition", "preposition"),
                _slot("target", "target"),
                _slot("head", "head"),
                _slot("tail", "tail"),
            ],
            "samples": [
                "{action} {product} {preposition} {target}",
                "{action} {product}",
                "{head} {action} {product}",
                "{action} {product} {tail}",
                "{head} {action} {product} {tail}",
            ],
        },
        {
            "name": SELECT_CATEGORY_INTENT,
            "slots": [_slot("action", "action"), _slot("category", "Category")],
            "samples": ["{category}", "{action} {category}", "some {category}", "I want {category}"],
        },
        {
            "name": SELECT_PRODUCT_INTENT,
            "slots": [_slot("action", "action"), _slot("product", "Product")],
            "samples": ["{product}", "{action} {product}", "I want {product}", "some {product}"],
        },
        {
            "name": SET_COUNT_INTENT,
            "slots": [_slot("count", "AMAZON.NUMBER"), _slot("feedback", "feedback")],
            "samples": ["{count}", "{feedback} {count}", "{count} please", "I want {count}"],
        },
        {
            "name": SET_DELIVERY_DATE_INTENT,
            "slots": [_slot("deliveryDate", "AMAZON.DATE")],
            "samples": [
                "{deliveryDate}",
                "on {deliveryDate}",
                "deliver on {deliveryDate}",
                "deliver them {deliveryDate}",
                "{deliveryDate} please",
            ],
        },
    ]
    return intents


def _types(locale: str) -> List[Dict[str, Any]]:
    return [
        {"name": "Category", "values": _catalog_values(CATEGORY_IDS, locale)},
        {"name": "Product", "values": _catalog_values(FRUIT_IDS + VEGETABLE_IDS, locale)},
        {"name": "cart", "values": [_value("cart", _CART_SYNONYMS)]},
        {"name": "action", "values": [
            _value("add", ["put", "include"]),
            _value("set", ["change"]),
            _value("select", ["choose", "pick", "get", "buy"]),
        ]},
        {"name": "preposition", "values": [_value("to", ["into"]), _value("in"), _value("on")]},
        {"name": "target", "values": [
            _value("cart", _CART_SYNONYMS),
            _value("category"),
            _value("product"),
            _value("count", ["item count", "number of items"]),
            _value("deliveryDate", ["delivery date", "date to deliver"]),
        ]},
        {"name": "head", "values": [
            _value("please"),
            _value("I want to", ["i would like to", "i'd like to", "can you", "could you"]),
        ]},
        {"name": "tail", "values": [_value("please"), _value("thanks", ["thank you"])]},
        {"name": "feedback", "values": [
            _value("affirm", ["yes", "yeah", "correct"]),
            _value("disaffirm", ["no", "nope", "wrong"]),
        ]},
    ]


def build_interaction_model(invocation_name: str = INVOCATION_NAME, locale: str = "en-US") -> Dict[str, Any]:
    return {
        "interactionModel": {
            "languageModel": {
                "invocationName": invocation_name,
                "intents": _intents(),
                "types": _types(locale),
            }
        }
    }
