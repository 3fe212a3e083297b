"""Generic async repository with soft-delete filtering, sorting and paging."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from rampaged.core.ordering import EntityDescriptor, order_by_if
from rampaged.core.paged_list import PagedList
from rampaged.core.pagination import Pageable
from rampaged.core.query import Mapper, include_if, to_paged_list_async, where_if
from rampaged.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic read repository.

    Soft-deletes: rows with `deleted_at IS NOT NULL` are excluded from all
    standard reads.
    """

    model: type[ModelT]
    sort_fields: EntityDescriptor | None = None
    default_sort: str | None = None

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self) -> Select:
        """Return a SELECT excluding soft-deleted rows."""
        q = select(self.model)
        if hasattr(self.model, "deleted_at"):
            q = q.where(self.model.deleted_at.is_(None))
        return q

    def _load_options(self) -> tuple:
        """Loader options applied to list reads (e.g. selectinload)."""
        return ()

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            include_if(self._base_query(), bool(self._load_options()), *self._load_options())
            .where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def list(
        self,
        pageable: Pageable,
        *,
        filters: dict[str, Any] | None = None,
        mapper: Mapper | None = None,
    ) -> PagedList[Any]:
        """Return one page, filtered by simple column equality and sorted by `pageable.sort_by`."""
        q = self._base_query()

        # Apply simple equality filters
        for col_name, value in (filters or {}).items():
            column = getattr(self.model, col_name, None)
            q = where_if(q, value is not None and column is not None, column == value)

        q = include_if(q, bool(self._load_options()), *self._load_options())

        sort_by = pageable.sort_by or self.default_sort
        q = order_by_if(q, bool(sort_by), sort_by, self.model, self.sort_fields)

        return await to_paged_list_async(self._session, q, pageable, mapper)
