"""SQLAlchemy ORM model for customers."""

from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rampaged.db.base import Base
from rampaged.domain.mixins import TimestampMixin


class Customer(Base, TimestampMixin):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True, nullable=True)

    orders: Mapped[List["Order"]] = relationship(
        back_populates="customer", lazy="noload"
    )
