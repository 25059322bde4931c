# fruitshop/shop/root.py
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict

from .checkout import Checkout
from .dialog import CANCEL_INTENT, HELP_INTENT, STOP_INTENT, Reply, Turn
from .shopping_cart import ShoppingCart
from .strings import Translate

log = logging.getLogger(__name__)


class FruitShop:
    """
    Root of the conversation tree: the cart, then checkout.

    The cart gets first pick of every input; checkout only makes sense once the cart is done.
    Whatever neither child wants is handled here (launch, help, stop, fallback).
    """

    id = "root"

    def __init__(self, state: Dict[str, Any], tr: Translate, today: date) -> None:
        self.tr = tr
        self.cart = ShoppingCart(state["cart"], tr)
        self.checkout = Checkout(state["delivery"], state["cart"], tr, today)

    def handle(self, turn: Turn, reply: Reply) -> None:
        if self.cart.can_handle(turn):
            self.cart.handle(turn, reply)
        elif self.checkout.can_handle(turn):
            self.checkout.handle(turn, reply)
        elif turn.is_launch:
            reply.say(self.tr("WELCOME_MSG"))
        elif turn.is_session_ended:
            reply.end()
        elif turn.is_intent(CANCEL_INTENT, STOP_INTENT):
            reply.say(self.tr("GOODBYE_MSG"))
            reply.end()
        elif turn.is_intent(HELP_INTENT):
            reply.say(self.tr("HELP_MSG"))
        elif turn.is_fallback:
            log.debug("root: non-understanding")
            reply.say(self.tr("FRUIT_SHOP_CONTROL_NON_UNDERSTANDING"))
        else:
            log.warning("Nothing wants this input: %r", turn)
            reply.say(self.tr("FRUIT_SHOP_CONTROL_NON_UNDERSTANDING"))

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        if self.cart.can_take_initiative():
            self.cart.take_initiative(turn, reply)
        elif self.checkout.can_take_initiative():
            self.checkout.take_initiative(turn, reply)
