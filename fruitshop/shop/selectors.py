# fruitshop/shop/selectors.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .apl import product_list_document, text_list_datasource
from .catalog import (
    CATEGORY_IDS,
    FRUIT_IDS,
    VEGETABLE_IDS,
    category_for_product,
    count_needs_confirmation,
    count_problem,
    favorites,
    is_category,
    is_product,
    products_in_category,
)
from .dialog import SELECT_CATEGORY_INTENT, SELECT_PRODUCT_INTENT, SET_COUNT_INTENT, Reply, Turn
from .strings import Translate, format_list

log = logging.getLogger(__name__)


class _ListSelector:
    """Picks one id out of a fixed list, by voice or by touching the on-screen list."""

    id = ""
    key = ""

    def __init__(self, state: Dict[str, Any], tr: Translate) -> None:
        self.state = state
        self.tr = tr

    @property
    def value(self) -> Optional[str]:
        return self.state.get(self.key)

    def clear(self) -> None:
        self.state[self.key] = None

    def choices(self) -> List[str]:
        raise NotImplementedError

    def value_from_touch(self, turn: Turn) -> Optional[str]:
        ordinal = turn.event_ordinal()
        ids = self.choices()
        if ordinal is None or not 1 <= ordinal <= len(ids):
            log.warning("%s: touch ordinal out of range: %r", self.id, turn.arguments)
            return None
        return ids[ordinal - 1]

    def handle(self, turn: Turn, reply: Reply) -> None:
        if turn.is_user_event(self.id):
            value = self.value_from_touch(turn)
            if value is None:
                reply.say(self.tr("SHOPPING_CART_CONTROL_NON_UNDERSTANDING"))
                return
        else:
            value = turn.slot(self.key)
        self.set_value(value, reply)

    def set_value(self, value: Optional[str], reply: Reply) -> bool:
        raise NotImplementedError

    def show_choices(self, turn: Turn, reply: Reply) -> None:
        if not turn.supports_apl:
            return
        lines = [self.tr(c, count=0) for c in self.choices()]
        reply.show(
            self.id,
            product_list_document(),
            text_list_datasource(
                self.tr("PRODUCT_LIST_APL_TITLE"),
                self.tr("PRODUCT_LIST_APL_SUB_TITLE"),
                lines,
                control_id=self.id,
            ),
        )


class CategorySelector(_ListSelector):
    id = "category"
    key = "category"

    def choices(self) -> List[str]:
        return list(CATEGORY_IDS)

    def can_handle(self, turn: Turn) -> bool:
        if turn.is_intent(SELECT_CATEGORY_INTENT) and turn.slot("category") is not None:
            return True
        return turn.is_user_event(self.id)

    def set_value(self, value: Optional[str], reply: Reply) -> bool:
        if not is_category(value):
            log.info("category rejected: %r", value)
            reply.say(self.tr("CATEGORY_CONTROL_CATEGORY_IDS_VALIDATION_FAIL"))
            return False
        # no acknowledgement: the product question confirms it implicitly
        self.state[self.key] = str(value).strip().lower()
        return True

    def can_take_initiative(self) -> bool:
        return self.value is None and self.state.get("product") is None

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        reply.ask(self.tr("CATEGORY_CONTROL_REQUEST_VALUE"))
        self.show_choices(turn, reply)


class ProductSelector(_ListSelector):
    id = "product"
    key = "product"

    def choices(self) -> List[str]:
        category = self.state.get("category")
        if category:
            return products_in_category(category)
        return FRUIT_IDS + VEGETABLE_IDS

    def can_handle(self, turn: Turn) -> bool:
        if turn.is_intent(SELECT_PRODUCT_INTENT) and turn.slot("product") is not None:
            return True
        return turn.is_user_event(self.id)

    def set_value(self, value: Optional[str], reply: Reply) -> bool:
        if not is_product(value):
            log.info("product rejected: %r", value)
            reply.say(self.tr("PRODUCT_CONTROL_INVALID_VALUE"))
            return False
        pid = str(value).strip().lower()
        self.state[self.key] = pid
        self.state["category"] = category_for_product(pid)
        return True

    def can_take_initiative(self) -> bool:
        return self.value is None

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        category = self.state.get("category")
        if category:
            names = [self.tr(p, count=0) for p in favorites(category)]
            reply.ask(self.tr(
                "PRODUCT_CONTROL_REQUEST_VALUE_WITH_CATEGORY",
                category=self.tr(category, count=0),
                favorites=format_list(names, self.tr("AND")),
            ))
        else:
            reply.ask(self.tr("PRODUCT_CONTROL_REQUEST_VALUE_WITHOUT_CATEGORY"))
        self.show_choices(turn, reply)


class CountSelector:
    """
    How many of the product go into the cart.
    Counts outside 1..100 are rejected; large counts need a yes/no before they are accepted.
    """

    id = "itemCount"

    def __init__(self, state: Dict[str, Any], tr: Translate) -> None:
        self.state = state
        self.tr = tr

    @property
    def value(self) -> Optional[int]:
        return self.state.get("count")

    @property
    def awaiting_confirmation(self) -> bool:
        return bool(self.state.get("count_awaiting_confirmation"))

    @property
    def is_ready(self) -> bool:
        return self.value is not None and not self.awaiting_confirmation

    def clear(self) -> None:
        self.state["count"] = None
        self.state["count_awaiting_confirmation"] = False

    def can_handle(self, turn: Turn) -> bool:
        if turn.is_intent(SET_COUNT_INTENT) and turn.slot("count") is not None:
            return True
        return self.awaiting_confirmation and (turn.is_yes or turn.is_no)

    def handle(self, turn: Turn, reply: Reply) -> None:
        if turn.is_yes:
            self.state["count_awaiting_confirmation"] = False
            reply.say(self.tr("ITEM_COUNT_CONTROL_VALUE_AFFIRMED"))
        elif turn.is_no:
            self.clear()
            reply.say(self.tr("ITEM_COUNT_CONTROL_VALUE_DISAFFIRMED"))
        else:
            # "no, two" arrives as a plain new value and simply replaces the pending one
            self.set_value(turn.slot("count"), reply, acknowledge=True)

    def set_value(self, raw: Any, reply: Reply, acknowledge: bool = False) -> bool:
        try:
            count = int(str(raw).strip())
        except (TypeError, ValueError):
            count = None

        if count is None or count_problem(count):
            log.info("count rejected: %r", raw)
            self.clear()
            reply.say(self.tr("ITEM_COUNT_CONTROL_INVALID_VALUE"))
            return False

        self.state["count"] = count
        if count_needs_confirmation(count):
            self.state["count_awaiting_confirmation"] = True
            reply.ask(self.tr("ITEM_COUNT_CONTROL_CONFIRM_VALUE", value=count))
        else:
            self.state["count_awaiting_confirmation"] = False
            if acknowledge:
                reply.say(self.tr("ITEM_COUNT_CONTROL_VALUE_SET"))
        return True

    def can_take_initiative(self) -> bool:
        return self.value is None or self.awaiting_confirmation

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        if self.awaiting_confirmation:
            reply.ask(self.tr("ITEM_COUNT_CONTROL_CONFIRM_VALUE", value=self.value))
            return
        product = self.state.get("product")
        if product:
            reply.ask(self.tr("ITEM_COUNT_CONTROL_REQUEST_VALUE_WITH_PRODUCT", itemText=self.tr(product, count=0)))
        else:
            reply.ask(self.tr("ITEM_COUNT_CONTROL_REQUEST_VALUE_WITHOUT_PRODUCT"))
