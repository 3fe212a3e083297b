"""Standardized JSON response envelope helpers."""


from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from rampaged.core.paged_list import PagedList

T = TypeVar("T")


class PageMeta(BaseModel):
    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    has_previous: bool
    has_next: bool

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ data: [...], meta: {...} }`"""

    data: list[T]
    meta: PageMeta

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def paginated(paged_list: PagedList[Any]) -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {
        "data": paged_list.items,
        "meta": {
            "total_count": paged_list.total_count,
            "page_size": paged_list.page_size,
            "current_page": paged_list.current_page,
            "total_pages": paged_list.total_pages,
            "has_previous": paged_list.has_previous,
            "has_next": paged_list.has_next,
        },
    }
