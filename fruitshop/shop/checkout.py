# fruitshop/shop/checkout.py
from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Dict, Optional

from .dialog import SET_DELIVERY_DATE_INTENT, Reply, Turn
from .strings import Translate

log = logging.getLogger(__name__)

# AMAZON.DATE also yields weeks ("2019-W02"), months ("2019-01") etc.; only whole days are deliverable.
_DAY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_delivery_date(raw: Optional[str]) -> Optional[date]:
    v = (raw or "").strip()
    if not _DAY_RE.match(v):
        return None
    try:
        return date.fromisoformat(v)
    except ValueError:
        return None


class Checkout:
    """Picks the delivery date once the cart is complete, then places the order."""

    id = "delivery"

    def __init__(self, state: Dict[str, Any], cart_state: Dict[str, Any], tr: Translate, today: date) -> None:
        self.state = state
        self.cart_state = cart_state
        self.tr = tr
        self.today = today

    @property
    def value(self) -> Optional[str]:
        return self.state.get("date")

    def _cart_ready(self) -> bool:
        return bool(self.cart_state.get("cart_updating_complete")) and bool(self.cart_state.get("items"))

    def can_handle(self, turn: Turn) -> bool:
        return (
            turn.is_intent(SET_DELIVERY_DATE_INTENT)
            and turn.slot("deliveryDate") is not None
            and self._cart_ready()
        )

    def handle(self, turn: Turn, reply: Reply) -> None:
        raw = turn.slot("deliveryDate")
        day = parse_delivery_date(raw)
        if day is None:
            log.info("checkout: unusable date %r", raw)
            reply.say(self.tr("CHECKOUT_CONTROL_INVALID_DATE"))
            return
        if day <= self.today:
            log.info("checkout: date %s is not after %s", day, self.today)
            reply.say(self.tr("CHECKOUT_CONTROL_DATE_IN_PAST"))
            return

        self.state["date"] = day.isoformat()
        reply.say(self.tr("CHECKOUT_CONTROL_VALUE_SET", date=day.isoformat()))
        reply.order = {
            "items": [dict(it) for it in self.cart_state["items"]],
            "delivery_date": day.isoformat(),
        }
        log.info("checkout: order placed for %s with %d line(s)", day, len(self.cart_state["items"]))
        reply.end()

    def can_take_initiative(self) -> bool:
        return self.value is None and self._cart_ready()

    def take_initiative(self, turn: Turn, reply: Reply) -> None:
        reply.ask(self.tr("CHECKOUT_CONTROL_REQUEST_VALUE"))
