"""Domain package — ORM models of the reference service.

  customer.py  — Customer (one-to-many orders)
  order.py     — Order (many-to-one customer; target of aliased sorting)
  mixins.py    — Shared TimestampMixin
"""

from rampaged.domain.customer import Customer
from rampaged.domain.order import Order

__all__ = [
    "Customer",
    "Order",
]
