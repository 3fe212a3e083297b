"""
Page windows, counting and mapping against a real (in-memory) database.
"""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationInfo, field_validator
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session, selectinload

from rampaged.core.ordering import order_by_if
from rampaged.core.pagination import Pageable
from rampaged.core.query import count_query, include_if, map_items, paged, to_paged_list, to_paged_list_async, where_if
from rampaged.domain import Order
from rampaged.schemas.order import ORDER_SORT_FIELDS, OrderOut
from tests.support import ORDER_COUNT


def test_second_page_of_twenty_five(session: Session) -> None:
    stmt = order_by_if(select(Order), True, "number")
    page = to_paged_list(session, stmt, Pageable(page_number=2, page_size=10))

    assert len(page.items) == 10
    assert [o.number for o in page] == [f"ORD-{i:03d}" for i in range(11, 21)]
    assert page.total_count == ORDER_COUNT
    assert page.total_pages == 3
    assert page.has_previous
    assert page.has_next


def test_last_partial_page(session: Session) -> None:
    page = to_paged_list(session, select(Order), Pageable(page_number=3, page_size=10))

    assert len(page) == 5
    assert not page.has_next


def test_filtered_source_fits_one_page(session: Session) -> None:
    stmt = where_if(select(Order), True, Order.customer_id == "c1")
    page = to_paged_list(session, stmt, Pageable(page_number=1, page_size=10))

    assert len(page.items) == 5
    assert page.total_count == 5
    assert page.total_pages == 1
    assert not page.has_previous
    assert not page.has_next


def test_where_if_false_keeps_all_rows(session: Session) -> None:
    stmt = where_if(select(Order), False, Order.customer_id == "c1")

    assert session.execute(count_query(stmt)).scalar_one() == ORDER_COUNT


def test_count_ignores_ordering_and_window(session: Session) -> None:
    stmt = paged(order_by_if(select(Order), True, "customer", Order, ORDER_SORT_FIELDS), Pageable(page_size=3))

    assert session.execute(count_query(stmt)).scalar_one() == ORDER_COUNT


def test_paged_with_explicit_window(session: Session) -> None:
    stmt = paged(order_by_if(select(Order), True, "number"), skip_count=20, page_size=10)

    assert [o.number for o in session.scalars(stmt)] == [f"ORD-{i:03d}" for i in range(21, 26)]


def test_paged_requires_a_window() -> None:
    with pytest.raises(ValueError):
        paged(select(Order), skip_count=10)


def test_missing_source_is_an_empty_page(session: Session) -> None:
    page = to_paged_list(session, None, Pageable(page_number=2))

    assert page.items == []
    assert page.total_count == 0
    assert page.current_page == 2
    assert not page.has_next


def test_maps_rows_onto_schema(session: Session) -> None:
    stmt = include_if(select(Order), True, selectinload(Order.customer))
    page = to_paged_list(session, order_by_if(stmt, True, "number"), Pageable(page_size=2), mapper=OrderOut)

    assert all(isinstance(item, OrderOut) for item in page)
    assert page[0].number == "ORD-001"
    assert page[0].customer is not None
    assert page[0].customer.last_name == "Zeller"


def test_include_if_false_leaves_relationships_unloaded(session: Session) -> None:
    stmt = include_if(select(Order), False, selectinload(Order.customer))
    page = to_paged_list(session, order_by_if(stmt, True, "number"), Pageable(page_size=1), mapper=OrderOut)

    assert page[0].customer is None


class _OrderLabel(BaseModel):
    number: str

    @field_validator("number")
    @classmethod
    def add_prefix(cls, value: str, info: ValidationInfo) -> str:
        prefix = (info.context or {}).get("prefix", "")
        return f"{prefix}{value}"


def test_map_options_reach_the_schema_as_context(session: Session) -> None:
    page = to_paged_list(
        session,
        order_by_if(select(Order), True, "number"),
        Pageable(page_size=1),
        mapper=_OrderLabel,
        map_options={"prefix": "#"},
    )

    assert page[0].number == "#ORD-001"


def test_callable_mapper_receives_options() -> None:
    rows = [{"n": 1}, {"n": 2}]

    assert map_items(rows, lambda row, scale: row["n"] * scale, {"scale": 10}) == [10, 20]
    assert map_items(rows) == rows


async def test_async_pipeline(async_session: AsyncSession) -> None:
    stmt = order_by_if(select(Order), True, "-number")
    page = await to_paged_list_async(async_session, stmt, Pageable(page_number=2, page_size=10), mapper=OrderOut)

    assert len(page) == 10
    assert page[0].number == "ORD-015"
    assert page.total_count == ORDER_COUNT
    assert page.total_pages == 3
    assert page.has_previous and page.has_next


async def test_async_missing_source(async_session: AsyncSession) -> None:
    page = await to_paged_list_async(async_session, None, Pageable())

    assert page.items == []
    assert page.total_count == 0
