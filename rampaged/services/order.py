"""Order service — business rules for order listing.

Rule: No SQLAlchemy query building here; repositories own the queries.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from rampaged.core.exceptions import NotFoundError
from rampaged.core.paged_list import PagedList
from rampaged.domain.order import Order
from rampaged.repositories.order import OrderRepository
from rampaged.schemas.order import OrderOut, OrderQuery

class OrderService:
    def __init__(self, session: AsyncSession):
        self._repo = OrderRepository(session)

    async def list_orders(self, query: OrderQuery) -> PagedList[OrderOut]:
        return await self._repo.list(
            query,
            filters={"status": query.status},
            mapper=OrderOut,
        )

    async def get_order(self, order_id: str) -> Order:
        order = await self._repo.get_by_id(order_id)
        if not order:
            raise NotFoundError("Order", order_id)
        return order
