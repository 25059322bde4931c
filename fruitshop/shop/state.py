# fruitshop/shop/state.py
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from .catalog import category_for_product, count_problem, is_category, is_product
from .strings import Translate, format_list


def new_cart_state() -> Dict[str, Any]:
    return {
        "items": [],
        "pending_products": [],
        "asking_to_add_another": False,
        "cart_updating_complete": False,
        "category": None,
        "product": None,
        "count": None,
        "count_awaiting_confirmation": False,
    }


def new_delivery_state() -> Dict[str, Any]:
    return {"date": None}


def _clean_items(raw: Any) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    if not isinstance(raw, list):
        return out
    for it in raw:
        if not isinstance(it, dict):
            continue
        pid = str(it.get("product_id") or "").strip().lower()
        try:
            count = int(it.get("count"))
        except (TypeError, ValueError):
            continue
        if is_product(pid) and count_problem(count) is None:
            out.append({"product_id": pid, "count": count})
    return out


def _clean_selection(cart: Dict[str, Any]) -> None:
    """Per-item values must stay inside the catalog and the count limits."""
    product = cart.get("product")
    category = cart.get("category")

    if product is not None and not (isinstance(product, str) and is_product(product)):
        product = None
    if product is not None:
        product = product.strip().lower()
        category = category_for_product(product)
    elif category is not None and not (isinstance(category, str) and is_category(category)):
        category = None
    elif category is not None:
        category = category.strip().lower()
    cart["product"] = product
    cart["category"] = category

    count = cart.get("count")
    if not isinstance(count, int) or isinstance(count, bool) or count_problem(count):
        cart["count"] = None
        cart["count_awaiting_confirmation"] = False


def load_state(attributes: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Session attributes -> full skill state.
    Missing or malformed parts fall back to defaults; the input is never mutated.
    """
    attrs = copy.deepcopy(attributes) if isinstance(attributes, dict) else {}

    cart = new_cart_state()
    raw_cart = attrs.get("cart")
    if isinstance(raw_cart, dict):
        for k in cart:
            if k in raw_cart:
                cart[k] = raw_cart[k]
    cart["items"] = _clean_items(cart.get("items"))
    pending = cart.get("pending_products")
    if not isinstance(pending, list):
        pending = []
    cart["pending_products"] = [p.strip().lower() for p in pending if isinstance(p, str) and is_product(p)]
    for flag in ("asking_to_add_another", "cart_updating_complete", "count_awaiting_confirmation"):
        cart[flag] = cart.get(flag) is True
    _clean_selection(cart)

    delivery = new_delivery_state()
    raw_delivery = attrs.get("delivery")
    if isinstance(raw_delivery, dict):
        delivery["date"] = raw_delivery.get("date") or None

    return {"cart": cart, "delivery": delivery}


def dump_state(state: Dict[str, Any]) -> Dict[str, Any]:
    return copy.deepcopy(state)


# ----------------------------
# Rendering
# ----------------------------
def render_item(item: Dict[str, Any], tr: Translate) -> str:
    count = int(item.get("count", 1) or 1)
    return f"{count} {tr(str(item.get('product_id', '')), count=count)}"


def cart_content(items: List[Dict[str, Any]], tr: Translate) -> str:
    return format_list([render_item(it, tr) for it in items], tr("AND"))
