# tests/test_envelope.py
from __future__ import annotations

from fruitshop.envelope import RequestEnvelope, Slot, build_response, resolve_value, slot_values
from fruitshop.shop.dialog import Reply, Turn
from skill_helpers import envelope, intent_request, launch_request


def _resolutions(code, rid=None):
    values = [{"value": {"name": "apples", "id": rid}}] if rid else []
    return {"resolutionsPerAuthority": [{"authority": "x", "status": {"code": code}, "values": values}]}


def test_resolved_id_wins_over_spoken_value():
    assert resolve_value("apples", _resolutions("ER_SUCCESS_MATCH", "apple")) == "apple"


def test_spoken_value_when_nothing_matched():
    assert resolve_value(" apples ", _resolutions("ER_SUCCESS_NO_MATCH")) == "apples"
    assert resolve_value("", None) is None
    assert resolve_value(None, None) is None


def test_slot_values_for_each_slot_shape():
    assert slot_values(None) == []
    assert slot_values(Slot(name="count")) == []
    assert slot_values(Slot(name="count", value="3")) == ["3"]
    assert slot_values(Slot(name="product", slotValue={"type": "Simple", "value": "apple"})) == ["apple"]
    multi = Slot(name="product", slotValue={"type": "List", "values": [
        {"type": "Simple", "value": "apples", "resolutions": _resolutions("ER_SUCCESS_MATCH", "apple")},
        {"type": "Simple", "value": "banana"},
    ]})
    assert slot_values(multi) == ["apple", "banana"]


def test_envelope_accessors():
    env = RequestEnvelope(**envelope(intent_request("SetCountIntent", count=2), {"cart": {}}, apl=True))
    assert env.application_id() == "amzn1.ask.skill.TEST"
    assert env.user_id() == "amzn1.ask.account.TEST"
    assert env.session_attributes() == {"cart": {}}
    assert "Alexa.Presentation.APL" in env.supported_interfaces()


def test_turn_from_envelope():
    env = RequestEnvelope(**envelope(intent_request("SetCountIntent", count=2), apl=True))
    turn = Turn.from_envelope(env)
    assert turn.is_intent("SetCountIntent")
    assert turn.slot("count") == "2"
    assert turn.supports_apl
    assert turn.locale == "en-US"


def test_turn_falls_back_to_default_locale():
    raw = envelope(launch_request())
    raw["request"].pop("locale")
    turn = Turn.from_envelope(RequestEnvelope(**raw), default_locale="en-GB")
    assert turn.is_launch
    assert turn.locale == "en-GB"
    assert not turn.supports_apl


def test_response_with_question_has_reprompt():
    reply = Reply().say("OK.").ask("How many apples?")
    body = build_response(reply, {"cart": {}})
    assert body["sessionAttributes"] == {"cart": {}}
    assert body["response"]["shouldEndSession"] is False
    assert body["response"]["outputSpeech"]["ssml"] == "<speak>OK. How many apples?</speak>"
    assert body["response"]["reprompt"]["outputSpeech"]["ssml"] == "<speak>How many apples?</speak>"
    assert "directives" not in body["response"]


def test_ending_response_has_no_reprompt():
    body = build_response(Reply().say("Goodbye.").end(), {})
    assert body["response"]["shouldEndSession"] is True
    assert "reprompt" not in body["response"]


def test_speech_is_escaped():
    body = build_response(Reply().say("Fish & <chips>"), {})
    assert body["response"]["outputSpeech"]["ssml"] == "<speak>Fish &amp; &lt;chips&gt;</speak>"
