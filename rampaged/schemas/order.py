"""Order Pydantic schemas: list query, response model and sort fields."""


from datetime import datetime

from rampaged.core.ordering import EntityDescriptor
from rampaged.core.pagination import Pageable
from rampaged.schemas.common import CamelModel
from rampaged.schemas.customer import CustomerOut

class OrderQuery(Pageable):
    """`GET /orders` query: paging plus an optional status filter."""

    status: str | None = None

class OrderOut(CamelModel):
    id: str
    number: str
    status: str
    amount_cents: int
    notes: str | None = None
    created_at: datetime
    customer: CustomerOut | None = None

# "customer" sorts by the customer's last name, "total" by the stored amount.
# Free-text notes are not sortable: the empty address drops the term.
ORDER_SORT_FIELDS = EntityDescriptor.from_schema(
    OrderOut,
    aliases={
        "customer": "customer.last_name",
        "total": "amount_cents",
        "notes": "",
    },
)
