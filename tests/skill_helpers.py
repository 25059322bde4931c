# tests/skill_helpers.py
from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fruitshop.envelope import Slot
from fruitshop.shop.brain import handle_turn
from fruitshop.shop.dialog import (
    APL_USER_EVENT,
    INTENT_REQUEST,
    LAUNCH_REQUEST,
    SELECT_CATEGORY_INTENT,
    SELECT_PRODUCT_INTENT,
    SET_COUNT_INTENT,
    SET_DELIVERY_DATE_INTENT,
    Reply,
    Turn,
)

TODAY = date(2019, 1, 3)


# ----------------------------
# Turn builders
# ----------------------------
def launch(**kw: Any) -> Turn:
    return Turn(LAUNCH_REQUEST, locale=kw.pop("locale", "en-US"), **kw)


def intent(name: str, supports_apl: bool = False, locale: str = "en-US", **slots: Any) -> Turn:
    built: Dict[str, Slot] = {}
    for k, v in slots.items():
        if isinstance(v, list):
            built[k] = multi_value_slot(k, v)
        else:
            built[k] = Slot(name=k, value=str(v))
    return Turn(INTENT_REQUEST, name, built, locale=locale, supports_apl=supports_apl)


def multi_value_slot(name: str, values: List[str]) -> Slot:
    return Slot(
        name=name,
        slotValue={"type": "List", "values": [{"type": "Simple", "value": v} for v in values]},
    )


def touch(node_id: str, ordinal: Any) -> Turn:
    return Turn(APL_USER_EVENT, arguments=[node_id, ordinal], locale="en-US", supports_apl=True)


def category(value: str) -> Turn:
    return intent(SELECT_CATEGORY_INTENT, category=value)


def product(value: str) -> Turn:
    return intent(SELECT_PRODUCT_INTENT, product=value)


def count(value: Any) -> Turn:
    return intent(SET_COUNT_INTENT, count=value)


def delivery(value: str) -> Turn:
    return intent(SET_DELIVERY_DATE_INTENT, deliveryDate=value)


# ----------------------------
# Conversation driver
# ----------------------------
class SkillTester:
    """Carries session attributes from turn to turn, like the voice platform does."""

    def __init__(self, today: date = TODAY, attributes: Optional[Dict[str, Any]] = None) -> None:
        self.today = today
        self.attributes: Dict[str, Any] = dict(attributes or {})

    def test_turn(self, user: str, turn: Turn, expected: str) -> Reply:
        reply, self.attributes = handle_turn(turn, self.attributes, today=self.today)
        want = expected[3:] if expected.startswith("A: ") else expected
        assert reply.prompt == want, f"{user!r}: got {reply.prompt!r}, want {want!r}"
        return reply

    @property
    def cart(self) -> Dict[str, Any]:
        return self.attributes["cart"]


# ----------------------------
# Envelopes (for the HTTP tests)
# ----------------------------
def envelope(
    request: Dict[str, Any],
    attributes: Optional[Dict[str, Any]] = None,
    apl: bool = False,
    user_id: str = "amzn1.ask.account.TEST",
    application_id: str = "amzn1.ask.skill.TEST",
) -> Dict[str, Any]:
    interfaces: Dict[str, Any] = {"Alexa.Presentation.APL": {"runtime": {"maxVersion": "1.3"}}} if apl else {}
    return {
        "version": "1.0",
        "session": {
            "new": attributes is None,
            "sessionId": "amzn1.echo-api.session.TEST",
            "application": {"applicationId": application_id},
            "user": {"userId": user_id},
            "attributes": attributes or {},
        },
        "context": {
            "System": {
                "application": {"applicationId": application_id},
                "user": {"userId": user_id},
                "device": {"deviceId": "TEST", "supportedInterfaces": interfaces},
            }
        },
        "request": {"requestId": "amzn1.echo-api.request.TEST", "locale": "en-US", **request},
    }


def launch_request() -> Dict[str, Any]:
    return {"type": "LaunchRequest"}


def intent_request(name: str, **slots: Any) -> Dict[str, Any]:
    return {
        "type": "IntentRequest",
        "intent": {
            "name": name,
            "confirmationStatus": "NONE",
            "slots": {k: {"name": k, "value": str(v), "confirmationStatus": "NONE"} for k, v in slots.items()},
        },
    }
