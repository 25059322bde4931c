# fruitshop/shop/dialog.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..envelope import APL_INTERFACE, RequestEnvelope, Slot, slot_values

# ----------------------------
# Request types + intent names
# ----------------------------
LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"
APL_USER_EVENT = "Alexa.Presentation.APL.UserEvent"

YES_INTENT = "AMAZON.YesIntent"
NO_INTENT = "AMAZON.NoIntent"
HELP_INTENT = "AMAZON.HelpIntent"
STOP_INTENT = "AMAZON.StopIntent"
CANCEL_INTENT = "AMAZON.CancelIntent"
FALLBACK_INTENT = "AMAZON.FallbackIntent"

ADD_ITEM_INTENT = "AddItemIntent"
ADD_PRODUCT_INTENT = "AddProductIntent"
CHECK_CART_INTENT = "CheckCartIntent"
SELECT_CATEGORY_INTENT = "SelectCategoryIntent"
SELECT_PRODUCT_INTENT = "SelectProductIntent"
SET_COUNT_INTENT = "SetCountIntent"
SET_DELIVERY_DATE_INTENT = "SetDeliveryDateIntent"


class Turn:
    """One user turn, already resolved by the voice platform into a request type, intent and slots."""

    def __init__(
        self,
        request_type: str,
        intent_name: Optional[str] = None,
        slots: Optional[Dict[str, Slot]] = None,
        arguments: Optional[List[Any]] = None,
        locale: Optional[str] = None,
        supports_apl: bool = False,
    ) -> None:
        self.request_type = request_type
        self.intent_name = intent_name
        self.slots: Dict[str, Slot] = dict(slots or {})
        self.arguments: List[Any] = list(arguments or [])
        self.locale = locale
        self.supports_apl = supports_apl

    @classmethod
    def from_envelope(cls, envelope: RequestEnvelope, default_locale: Optional[str] = None) -> "Turn":
        req = envelope.request
        return cls(
            request_type=req.type,
            intent_name=req.intent.name if req.intent else None,
            slots=req.intent.slots if req.intent else None,
            arguments=req.arguments,
            locale=req.locale or default_locale,
            supports_apl=APL_INTERFACE in envelope.supported_interfaces(),
        )

    def __repr__(self) -> str:
        return f"Turn({self.request_type!r}, intent={self.intent_name!r}, args={self.arguments!r})"

    # --- predicates ---
    def is_intent(self, *names: str) -> bool:
        return self.request_type == INTENT_REQUEST and self.intent_name in names

    @property
    def is_launch(self) -> bool:
        return self.request_type == LAUNCH_REQUEST

    @property
    def is_session_ended(self) -> bool:
        return self.request_type == SESSION_ENDED_REQUEST

    @property
    def is_fallback(self) -> bool:
        return self.is_intent(FALLBACK_INTENT)

    @property
    def is_yes(self) -> bool:
        return self.is_intent(YES_INTENT)

    @property
    def is_no(self) -> bool:
        return self.is_intent(NO_INTENT)

    def is_user_event(self, node_id: str) -> bool:
        return (
            self.request_type == APL_USER_EVENT
            and len(self.arguments) >= 2
            and self.arguments[0] == node_id
        )

    def event_ordinal(self) -> Optional[int]:
        """1-based ordinal of the touched list item, or None."""
        if len(self.arguments) < 2:
            return None
        try:
            return int(self.arguments[1])
        except (TypeError, ValueError):
            return None

    # --- slots ---
    def slot(self, name: str) -> Optional[str]:
        values = slot_values(self.slots.get(name))
        return values[0] if values else None

    def slot_values(self, name: str) -> List[str]:
        return slot_values(self.slots.get(name))


class Reply:
    """
    What the skill says and shows for one turn.
    Fragments are spoken in order; `question` is the reprompt when the turn asked one.
    """

    def __init__(self) -> None:
        self.fragments: List[str] = []
        self.question: Optional[str] = None
        self.directives: List[Dict[str, Any]] = []
        self.end_session = False
        self.order: Optional[Dict[str, Any]] = None

    def say(self, text: str) -> "Reply":
        if text:
            self.fragments.append(text)
        return self

    def ask(self, question: str) -> "Reply":
        self.say(question)
        self.question = question
        return self

    def show(self, token: str, document: Dict[str, Any], datasources: Dict[str, Any]) -> "Reply":
        self.directives.append({
            "type": "Alexa.Presentation.APL.RenderDocument",
            "token": token,
            "document": document,
            "datasources": datasources,
        })
        return self

    def end(self) -> "Reply":
        self.end_session = True
        return self

    @property
    def has_question(self) -> bool:
        return self.question is not None

    @property
    def display_used(self) -> bool:
        return bool(self.directives)

    @property
    def prompt(self) -> str:
        return " ".join(f.strip() for f in self.fragments if f and f.strip())
