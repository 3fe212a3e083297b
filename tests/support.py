"""
Seed data shared by the database fixtures and the assertions that check them.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rampaged.domain import Customer, Order

CUSTOMERS = [
    ("c1", "Ada", "Zeller"),
    ("c2", "Ben", "Adams"),
    ("c3", "Cy", "Miller"),
    ("c4", "Di", "Brown"),
    ("c5", "Ed", "Clark"),
]
STATUSES = ["pending", "paid", "shipped"]
ORDER_COUNT = 25


def order_amount(i: int) -> int:
    return (i * 37) % 100 * 100 + i


def build_rows(*, include_deleted: bool = False) -> list[object]:
    """5 customers and 25 orders ORD-001..ORD-025, round-robin over customers."""
    rows: list[object] = [
        Customer(id=cid, first_name=first, last_name=last, email=f"{first.lower()}@example.com")
        for cid, first, last in CUSTOMERS
    ]
    for i in range(1, ORDER_COUNT + 1):
        rows.append(
            Order(
                id=f"o{i:03d}",
                number=f"ORD-{i:03d}",
                status=STATUSES[i % 3],
                amount_cents=order_amount(i),
                notes=f"note {i}",
                customer_id=CUSTOMERS[(i - 1) % len(CUSTOMERS)][0],
            )
        )
    if include_deleted:
        rows.append(
            Order(
                id="o999",
                number="ORD-999",
                status="paid",
                amount_cents=1,
                customer_id="c1",
                deleted_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
        )
    return rows
