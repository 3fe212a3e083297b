"""Customer Pydantic schemas (response models) and sort fields."""


from datetime import datetime

from rampaged.core.ordering import EntityDescriptor
from rampaged.schemas.common import CamelModel

class CustomerOut(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str | None = None
    created_at: datetime

CUSTOMER_SORT_FIELDS = EntityDescriptor.from_schema(
    CustomerOut, aliases={"name": "last_name"},
)
