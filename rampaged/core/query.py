"""Query shaping helpers: conditional filters, page windows and paged results.

Count and slice are always taken from the same statement, so the filters
behind ``total_count`` and ``items`` are identical.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from rampaged.core.paged_list import PagedList
from rampaged.core.pagination import Pageable

logger = logging.getLogger(__name__)

Mapper = type[BaseModel] | Callable[..., Any]


# ------------------------------------------------------------------
# Statement helpers
# ------------------------------------------------------------------

def paged(
    stmt: Select,
    pageable: Pageable | None = None,
    *,
    skip_count: int | None = None,
    page_size: int | None = None,
) -> Select:
    """Restrict ``stmt`` to one page window (OFFSET/LIMIT)."""
    if pageable is not None:
        skip_count, page_size = pageable.skip_count, pageable.page_size
    if skip_count is None or page_size is None:
        raise ValueError("paged() needs a pageable or both skip_count and page_size")
    return stmt.offset(skip_count).limit(page_size)


def count_query(stmt: Select) -> Select:
    """SELECT count(*) over ``stmt`` with its ordering and window removed."""
    inner = stmt.order_by(None).offset(None).limit(None)
    return select(func.count()).select_from(inner.subquery())


def where_if(stmt: Select, condition: bool, *criteria: Any) -> Select:
    if condition:
        return stmt.where(*criteria)
    return stmt


def include_if(stmt: Select, condition: bool, *options: Any) -> Select:
    """Apply loader options (``selectinload(...)`` etc.) when ``condition`` holds."""
    if condition:
        return stmt.options(*options)
    return stmt


# ------------------------------------------------------------------
# Result mapping
# ------------------------------------------------------------------

def _rows(result: Result, stmt: Select) -> list[Any]:
    if len(stmt.column_descriptions) == 1:
        return list(result.scalars().all())
    return list(result.all())


def map_items(rows: Sequence[Any], mapper: Mapper | None = None, map_options: dict[str, Any] | None = None) -> list[Any]:
    """Project rows onto a destination shape.

    A pydantic model class validates each row from attributes, with
    ``map_options`` as the validation context. Any other callable is invoked
    as ``mapper(row, **map_options)``.
    """
    if mapper is None:
        return list(rows)
    if isinstance(mapper, type) and issubclass(mapper, BaseModel):
        return [mapper.model_validate(row, from_attributes=True, context=map_options) for row in rows]
    return [mapper(row, **(map_options or {})) for row in rows]


# ------------------------------------------------------------------
# Paged results
# ------------------------------------------------------------------

def to_paged_list(
    session: Session,
    stmt: Select | None,
    pageable: Pageable,
    mapper: Mapper | None = None,
    map_options: dict[str, Any] | None = None,
) -> PagedList[Any]:
    """Count, slice and (optionally) map ``stmt`` into a page."""
    if stmt is None:
        return PagedList.empty(pageable)

    total = session.execute(count_query(stmt)).scalar_one()
    page_stmt = paged(stmt, pageable)
    rows = _rows(session.execute(page_stmt), page_stmt)

    logger.debug("Page %d (size %d): %d of %d rows", pageable.page_number, pageable.page_size, len(rows), total)
    return PagedList.from_pageable(map_items(rows, mapper, map_options), total, pageable)


async def to_paged_list_async(
    session: AsyncSession,
    stmt: Select | None,
    pageable: Pageable,
    mapper: Mapper | None = None,
    map_options: dict[str, Any] | None = None,
) -> PagedList[Any]:
    """Awaitable variant of :func:`to_paged_list`."""
    if stmt is None:
        return PagedList.empty(pageable)

    total = (await session.execute(count_query(stmt))).scalar_one()
    page_stmt = paged(stmt, pageable)
    rows = _rows(await session.execute(page_stmt), page_stmt)

    logger.debug("Page %d (size %d): %d of %d rows", pageable.page_number, pageable.page_size, len(rows), total)
    return PagedList.from_pageable(map_items(rows, mapper, map_options), total, pageable)
