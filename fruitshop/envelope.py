# fruitshop/envelope.py
from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .shop.dialog import Reply

APL_INTERFACE = "Alexa.Presentation.APL"
ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"


# -------------------
# Request schemas (the subset of the envelope the skill reads)
# -------------------
class Slot(BaseModel):
    name: str = ""
    value: Optional[str] = None
    resolutions: Optional[Dict[str, Any]] = None
    # multi-value slots: {"type": "List", "values": [{"type": "Simple", "value": ..., "resolutions": ...}]}
    slotValue: Optional[Dict[str, Any]] = None


class Intent(BaseModel):
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)


class Request(BaseModel):
    type: str
    requestId: str = ""
    locale: Optional[str] = None
    intent: Optional[Intent] = None
    arguments: Optional[List[Any]] = None
    reason: Optional[str] = None


class Session(BaseModel):
    sessionId: str = ""
    new: bool = False
    attributes: Optional[Dict[str, Any]] = None
    application: Dict[str, Any] = Field(default_factory=dict)
    user: Dict[str, Any] = Field(default_factory=dict)


class RequestEnvelope(BaseModel):
    version: str = "1.0"
    session: Optional[Session] = None
    context: Dict[str, Any] = Field(default_factory=dict)
    request: Request

    def application_id(self) -> str:
        if self.session and self.session.application.get("applicationId"):
            return str(self.session.application["applicationId"])
        app = ((self.context.get("System") or {}).get("application") or {})
        return str(app.get("applicationId") or "")

    def user_id(self) -> str:
        if self.session and self.session.user.get("userId"):
            return str(self.session.user["userId"])
        user = ((self.context.get("System") or {}).get("user") or {})
        return str(user.get("userId") or "")

    def session_id(self) -> str:
        return self.session.sessionId if self.session else ""

    def session_attributes(self) -> Dict[str, Any]:
        if not self.session or not isinstance(self.session.attributes, dict):
            return {}
        return self.session.attributes

    def supported_interfaces(self) -> Dict[str, Any]:
        device = ((self.context.get("System") or {}).get("device") or {})
        v = device.get("supportedInterfaces") or {}
        return v if isinstance(v, dict) else {}


# -------------------
# Slot helpers
# -------------------
def resolve_value(value: Optional[str], resolutions: Optional[Dict[str, Any]]) -> Optional[str]:
    """
    Entity-resolved id when an authority matched, otherwise the raw spoken value.
    """
    for authority in ((resolutions or {}).get("resolutionsPerAuthority") or []):
        if ((authority.get("status") or {}).get("code")) != ER_SUCCESS_MATCH:
            continue
        for v in (authority.get("values") or []):
            rid = ((v.get("value") or {}).get("id"))
            if rid:
                return str(rid)
    if value is None:
        return None
    v = str(value).strip()
    return v or None


def slot_values(slot: Optional[Slot]) -> List[str]:
    if slot is None:
        return []

    sv = slot.slotValue or {}
    if sv.get("type") == "List":
        out: List[str] = []
        for item in (sv.get("values") or []):
            if not isinstance(item, dict):
                continue
            r = resolve_value(item.get("value"), item.get("resolutions"))
            if r:
                out.append(r)
        return out

    if sv.get("type") == "Simple" and slot.value is None:
        r = resolve_value(sv.get("value"), sv.get("resolutions"))
        return [r] if r else []

    r = resolve_value(slot.value, slot.resolutions)
    return [r] if r else []


# -------------------
# Response
# -------------------
def _ssml(text: str) -> Dict[str, str]:
    return {"type": "SSML", "ssml": f"<speak>{escape(text, quote=False)}</speak>"}


def build_response(reply: "Reply", attributes: Dict[str, Any]) -> Dict[str, Any]:
    response: Dict[str, Any] = {"shouldEndSession": bool(reply.end_session)}

    prompt = reply.prompt
    if prompt:
        response["outputSpeech"] = _ssml(prompt)
    if reply.question and not reply.end_session:
        response["reprompt"] = {"outputSpeech": _ssml(reply.question)}
    if reply.directives:
        response["directives"] = list(reply.directives)

    return {
        "version": "1.0",
        "sessionAttributes": attributes,
        "response": response,
    }
