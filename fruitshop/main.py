# fruitshop/main.py
from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy.orm import Session

from .config import settings
from .db import Base, engine, get_db
from .envelope import RequestEnvelope, build_response
from .models import Order
from .shop.brain import handle_turn
from .shop.dialog import Turn
from .shop.interaction_model import build_interaction_model

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Fruit Shop Skill",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

Base.metadata.create_all(bind=engine)


# -------------------
# Helpers
# -------------------
def get_today() -> date:
    return date.today()


def _safe_json_list(raw: str | None) -> List[Any]:
    if not raw:
        return []
    try:
        v = json.loads(raw)
        return v if isinstance(v, list) else []
    except ValueError:
        return []


def _require_skill_id(envelope: RequestEnvelope) -> None:
    if not settings.skill_id:
        return
    app_id = envelope.application_id()
    if app_id != settings.skill_id:
        log.warning("Rejected request for application %r", app_id)
        raise HTTPException(status_code=403, detail="Unknown skill")


def save_order(db: Session, envelope: RequestEnvelope, order: Dict[str, Any]) -> Order:
    row = Order(
        user_id=envelope.user_id() or "anonymous",
        session_id=envelope.session_id(),
        status="confirmed",
        items_json=json.dumps(order.get("items") or [], ensure_ascii=False),
        delivery_date=str(order["delivery_date"]),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    log.info("Saved order #%s for %s", row.id, row.user_id)
    return row


# -------------------
# Health
# -------------------
@app.get("/")
def root():
    return {"ok": True, "service": "fruit-shop-skill"}


# -------------------
# Skill endpoint
# -------------------
@app.post("/skill")
def skill(
    envelope: RequestEnvelope,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    _require_skill_id(envelope)

    turn = Turn.from_envelope(envelope, default_locale=settings.default_locale)
    reply, attributes = handle_turn(turn, envelope.session_attributes(), today=today)

    if reply.order:
        save_order(db, envelope, reply.order)

    return build_response(reply, attributes)


# -------------------
# Interaction model
# -------------------
@app.get("/interaction-model")
def interaction_model():
    return build_interaction_model()


# -------------------
# Orders
# -------------------
@app.get("/orders/{user_id}")
def list_orders(user_id: str, db: Session = Depends(get_db)):
    rows = (
        db.query(Order)
        .filter(Order.user_id == user_id)
        .order_by(Order.id.desc())
        .all()
    )
    return [
        {
            "order_id": o.id,
            "status": o.status,
            "delivery_date": o.delivery_date,
            "items": _safe_json_list(o.items_json),
            "created_at": o.created_at.isoformat() if o.created_at else None,
        }
        for o in rows
    ]
