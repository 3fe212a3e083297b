from sqlalchemy.ext.asyncio import AsyncSession

from rampaged.core.paged_list import PagedList
from rampaged.core.pagination import Pageable
from rampaged.repositories.customer import CustomerRepository
from rampaged.schemas.customer import CustomerOut

class CustomerService:
    def __init__(self, session: AsyncSession):
        self._repo = CustomerRepository(session)

    async def list_customers(self, pageable: Pageable) -> PagedList[CustomerOut]:
        return await self._repo.list(pageable, mapper=CustomerOut)
