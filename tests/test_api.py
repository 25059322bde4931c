# tests/test_api.py
from __future__ import annotations

from fruitshop.config import settings
from skill_helpers import envelope, intent_request, launch_request


def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "service": "fruit-shop-skill"}


def test_launch(client):
    r = client.post("/skill", json=envelope(launch_request()))
    assert r.status_code == 200
    body = r.json()
    assert body["version"] == "1.0"
    assert body["response"]["outputSpeech"]["ssml"] == "<speak>Welcome to the fruit shop. What would you like?</speak>"
    assert body["response"]["reprompt"]["outputSpeech"]["ssml"] == "<speak>What would you like?</speak>"
    assert body["response"]["shouldEndSession"] is False
    assert body["sessionAttributes"]["cart"]["items"] == []


def test_launch_on_screen_device_renders_list(client):
    body = client.post("/skill", json=envelope(launch_request(), apl=True)).json()
    directives = body["response"]["directives"]
    assert [d["type"] for d in directives] == ["Alexa.Presentation.APL.RenderDocument"]
    assert directives[0]["token"] == "category"


def test_session_attributes_round_trip(client):
    first = client.post("/skill", json=envelope(intent_request("SelectProductIntent", product="apple"))).json()
    assert first["response"]["outputSpeech"]["ssml"] == "<speak>How many apples?</speak>"

    second = client.post(
        "/skill",
        json=envelope(intent_request("SetCountIntent", count=3), first["sessionAttributes"]),
    ).json()
    assert second["response"]["outputSpeech"]["ssml"] == (
        "<speak>OK. Added 3 apples. Would you like to add another item?</speak>"
    )
    assert second["sessionAttributes"]["cart"]["items"] == [{"product_id": "apple", "count": 3}]


def test_wrong_skill_id_is_rejected(client, monkeypatch):
    monkeypatch.setattr(settings, "skill_id", "amzn1.ask.skill.REAL")
    r = client.post("/skill", json=envelope(launch_request()))
    assert r.status_code == 403

    r = client.post("/skill", json=envelope(launch_request(), application_id="amzn1.ask.skill.REAL"))
    assert r.status_code == 200


def test_malformed_envelope(client):
    r = client.post("/skill", json={"version": "1.0"})
    assert r.status_code == 422


def test_order_is_saved_and_listed(client):
    user = "amzn1.ask.account.ORDERS"
    steps = [
        (intent_request("AddItemIntent", product="carrot", count=2), "Added 2 carrots. Would you like to add another item?"),
        (intent_request("AMAZON.NoIntent"), "OK. When would you like these items delivered?"),
        (intent_request("SetDeliveryDateIntent", deliveryDate="2019-01-08"), "Delivery will be on 2019-01-08."),
    ]
    attributes = None
    body = {}
    for request, speech in steps:
        body = client.post("/skill", json=envelope(request, attributes, user_id=user)).json()
        assert body["response"]["outputSpeech"]["ssml"] == f"<speak>{speech}</speak>"
        attributes = body["sessionAttributes"]
    assert body["response"]["shouldEndSession"] is True

    orders = client.get(f"/orders/{user}").json()
    assert len(orders) == 1
    assert orders[0]["status"] == "confirmed"
    assert orders[0]["delivery_date"] == "2019-01-08"
    assert orders[0]["items"] == [{"product_id": "carrot", "count": 2}]
    assert orders[0]["created_at"] is not None


def test_orders_for_unknown_user(client):
    assert client.get("/orders/nobody").json() == []


def test_interaction_model_endpoint(client):
    body = client.get("/interaction-model").json()
    assert body["interactionModel"]["languageModel"]["invocationName"] == "fruit shop"
