from rampaged.domain.customer import Customer
from rampaged.repositories.base import BaseRepository
from rampaged.schemas.customer import CUSTOMER_SORT_FIELDS


class CustomerRepository(BaseRepository[Customer]):
    model = Customer
    sort_fields = CUSTOMER_SORT_FIELDS
    default_sort = "last_name,first_name"
