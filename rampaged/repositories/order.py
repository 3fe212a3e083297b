"""Order repository — orders always load their customer."""


from sqlalchemy.orm import selectinload

from rampaged.domain.order import Order
from rampaged.repositories.base import BaseRepository
from rampaged.schemas.order import ORDER_SORT_FIELDS


class OrderRepository(BaseRepository[Order]):
    model = Order
    sort_fields = ORDER_SORT_FIELDS
    default_sort = "number"

    def _load_options(self) -> tuple:
        return (selectinload(Order.customer),)
