# fruitshop/models.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text

from .db import Base


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True)
    user_id = Column(String, index=True, nullable=False)
    session_id = Column(String, nullable=False, default="")
    status = Column(String, default="confirmed")
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    items_json = Column(Text, default="[]")
    delivery_date = Column(String, nullable=False)  # YYYY-MM-DD
