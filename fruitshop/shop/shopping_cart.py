# fruitshop/shop/shopping_cart.py
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from .apl import cart_list_document, text_list_datasource
from .catalog import category_for_product, is_product
from .dialog import ADD_ITEM_INTENT, ADD_PRODUCT_INTENT, CHECK_CART_INTENT, Reply, Turn
from .selectors import CategorySelector, CountSelector, ProductSelector
from .state import cart_content, render_item
from .strings import Translate

log = logging.getLogger(__name__)

Handler = Callable[[Turn, Reply], None]


class ShoppingCart:
    """
    Builds the cart one line item at a time.

    Children, asked in order: category (optional helper), product, count.
    Once product + count are settled the line is committed, then either the next
    pending product is picked up or the user is asked whether to add another item.
    """

    id = "cart"

    def __init__(self, state: Dict[str, Any], tr: Translate) -> None:
        self.state = state
        self.tr = tr

        self.category = CategorySelector(state, tr)
        self.product = ProductSelector(state, tr)
        self.count = CountSelector(state, tr)
        self.children = [self.category, self.product, self.count]

    @property
    def items(self) -> List[Dict[str, Any]]:
        return self.state["items"]

    @property
    def is_complete(self) -> bool:
        return bool(self.state.get("cart_updating_complete"))

    # ----------------------------
    # Routing
    # ----------------------------
    def _route(self, turn: Turn) -> Optional[Handler]:
        if turn.is_intent(ADD_ITEM_INTENT):
            return self._add_item
        if turn.is_intent(ADD_PRODUCT_INTENT):
            return self._add_product
        if turn.is_intent(CHECK_CART_INTENT):
            return self._check_cart
        if self.state.get("asking_to_add_another"):
            if turn.is_yes:
                return self._yes_to_another
            if turn.is_no:
                return self._no_to_another
        if turn.is_user_event(self.id):
            return self._remove_touched_item
        for child in self.children:
            if child.can_handle(turn):
                return child.handle
        if turn.is_fallback and not self.is_complete:
            return self._fallback
        return None

    def can_handle(self, turn: Turn) -> bool:
        return self._route(turn) is not None

    def handle(self, turn: Turn, reply: Reply) -> None:
        handler = self._route(turn)
        if handler is None:
            raise ValueError(f"cart cannot handle {turn!r}")

        log.info("cart: handling %r", turn)
        handler(turn, reply)

        if handler == self.product.handle:
            # user is (re)choosing the product, so any count belongs to the old one
            self.count.clear()

        if self.category.value is not None or self.product.value is not None or self.count.value is not None:
            # the user is still working on the cart, even if we thought they were done
            self.state["cart_updating_complete"] = False
            if handler != self._check_cart:
                # naming the next item answers "add another?" implicitly
                self.state["asking_to_add_another"] = False

        self.ensure_category_matches_product()

        if reply.has_question or reply.end_session:
            return

        if self.product.value is not None and self.count.is_ready:
            self._commit(turn, reply)

    def _commit(self, turn: Turn, reply: Reply) -> None:
        item = {"product_id": self.product.value, "count": self.count.value}
        reply.say(self.tr("SHOPPING_CART_CONTROL_ITEM_ADDED", itemText=render_item(item, self.tr)))
        log.info("cart: added item (%s, %s)", item["product_id"], item["count"])
        self.items.append(item)

        self.clear_item()

        if self.state["pending_products"]:
            self.pop_pending_product(reply)
        else:
            reply.ask(self.tr("SHOPPING_CART_CONTROL_ADD_ANOTHER_ITEM"))
            self.state["asking_to_add_another"] = True
            self.show_cart(turn, reply)

    # ----------------------------
    # Business rules
    # ----------------------------
    def ensure_category_matches_product(self) -> None:
        """The product is the primary information; a stale category is overwritten to match it."""
        product = self.product.value
        if not product:
            return
        category = category_for_product(product)
        if category is None:
            raise ValueError(f"product id is unknown: {product!r}")
        self.state["category"] = category

    def clear_item(self) -> None:
        self.category.clear()
        self.product.clear()
        self.count.clear()

    def set_product(self, value: Optional[str], reply: Reply) -> bool:
        if not self.product.set_value(value, reply):
            return False
        self.count.clear()
        return True

    def pop_pending_product(self, reply: Reply) -> None:
        pending = self.state["pending_products"]
        if not pending:
            return
        nxt = pending.pop(0)
        log.info("cart: next pending product %s (%d left)", nxt, len(pending))
        self.set_product(nxt, reply)

    def show_cart(self, turn: Turn, reply: Reply) -> None:
        if not turn.supports_apl:
            return
        reply.show(
            self.id,
            cart_list_document(self.id),
            text_list_datasource(
                self.tr("SHOPPING_CART_CONTROL_SHOW_CART_APL_TITLE"),
                self.tr("SHOPPING_CART_CONTROL_SHOW_CART_APL_SUB_TITLE"),
                [render_item(it, self.tr) for it in self.items],
            ),
        )

    # ----------------------------
    # Handlers
    # ----------------------------
    def _add_item(self, turn: Turn, reply: Reply) -> None:
        product = turn.slot("product")
        count = turn.slot("count")

        if product is not None and not self.set_product(product, reply):
            return
        if count is not None:
            # same checks as a spoken count, without the "OK." acknowledgement
            self.count.set_value(count, reply, acknowledge=False)

    def _add_product(self, turn: Turn, reply: Reply) -> None:
        values = turn.slot_values("product")
        log.info("cart: AddProductIntent with %d value(s): %s", len(values), " <and> ".join(values))

        known = [v.strip().lower() for v in values if is_product(v)]
        if len(known) != len(values):
            reply.say(self.tr("PRODUCT_CONTROL_INVALID_VALUE"))
        self.state["pending_products"].extend(known)

        if self.product.value is None:
            self.pop_pending_product(reply)

    def _check_cart(self, turn: Turn, reply: Reply) -> None:
        if not self.items:
            reply.say(self.tr("SHOPPING_CART_CONTROL_CART_IS_EMPTY"))
        else:
            reply.say(self.tr("SHOPPING_CART_CONTROL_TELL_CART_CONTENT", content=cart_content(self.items, self.tr)))
        reply.ask(self.tr("SHOPPING_CART_CONTROL_ADD_ANOTHER_ITEM"))
        self.state["asking_to_add_another"] = True

    def _yes_to_another(self, turn: Turn, reply: Reply) -> None:
        reply.say(self.tr("ACKNOWLEDGE"))
        self.state["asking_to_add_another"] = False
        self.state["cart_updating_complete"] = False
        self.clear_item()

    def _no_to_another(self, turn: Turn, reply: Reply) -> None:
        reply.say(self.tr("ACKNOWLEDGE"))
        self.state["asking_to_add_another"] = False
        self.state["cart_updating_complete"] = True
        self.clear_item()

        if not self.items:
            reply.say(self.tr("SHOPPING_CART_CONTROL_CART_IS_EMPTY"))
            reply.say(self.tr("GOODBYE_MSG"))
            reply.end()

    def _remove_touched_item(self, turn: Turn, reply: Reply) -> None:
        ordinal = turn.event_ordinal()
        if ordinal is None or not 1 <= ordinal <= len(self.items):
            log.warning("cart: touch on unknown line %r", turn.arguments)
            self._fallback(turn, reply)
            return

        removed = self.items.pop(ordinal - 1)
        log.info("cart: removed item (%s, %s)", removed["product_id"], removed["count"])
        reply.say(self.tr("SHOPPING_CART_CONTROL_ITEM_REMOVED", itemText=render_item(removed, self.tr)))
        self.show_cart(turn, reply)

    def _fallback(self, turn: Turn, reply: Reply) -> None:
        log.debug("cart: non-understanding")
        reply.say(self.tr("SHOPPING_CART_CONTROL_NON_UNDERSTANDING"))

    # ----------------------------
    # Initiative
    # ----------------------------
    def can_take_initiative(self) -> bool:
        if self.is_complete:
            log.info("cart: no initiative, cart updating is complete")
            return False
        if self.state.get("asking_to_add_another"):
            return True
        return any(child.can_take_initiative() for child in self.children)

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        if self.state.get("asking_to_add_another"):
            reply.ask(self.tr("SHOPPING_CART_CONTROL_ADD_ANOTHER_ITEM"))
            return
        for child in self.children:
            if child.can_take_initiative():
                child.take_initiative(turn, reply)
                return
