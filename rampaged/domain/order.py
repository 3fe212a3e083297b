"""SQLAlchemy ORM model for orders. Each order belongs to one customer."""

from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rampaged.db.base import Base
from rampaged.domain.mixins import TimestampMixin


class Order(Base, TimestampMixin):
    __tablename__ = "orders"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    # "pending" | "paid" | "shipped" | "cancelled"
    status: Mapped[str] = mapped_column(String(50), default="pending", nullable=False)
    amount_cents: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id"), nullable=False, index=True
    )
    customer: Mapped["Customer"] = relationship(back_populates="orders", lazy="noload")
