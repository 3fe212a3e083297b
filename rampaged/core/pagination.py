"""Page request model and the FastAPI dependency that builds it."""

from __future__ import annotations

from typing import ClassVar, TypeVar

from fastapi import Query
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from rampaged.core.config import settings

PageableT = TypeVar("PageableT", bound="Pageable")


class IgnoreInQueryString:
    """Field marker: keep the field out of generated page links.

    Usage: ``cursor: Annotated[str | None, IgnoreInQueryString()] = None``
    """

    def __repr__(self) -> str:
        return "IgnoreInQueryString()"


class Pageable(BaseModel):
    """A request for one page of a source, optionally sorted.

    Subclass it to add filter fields; every field that is not marked with
    :class:`IgnoreInQueryString` is carried into previous/next links.
    """

    max_page_size: ClassVar[int] = settings.max_page_size

    page_number: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.default_page_size, ge=1, validate_default=True)
    sort_by: str | None = None

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "validate_assignment": True,
    }

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return min(value, cls.max_page_size)

    @property
    def skip_count(self) -> int:
        # Derived, so never part of the query string.
        return self.page_size * (self.page_number - 1)


class PaginationParams:
    """FastAPI dependency for `?pageNumber=1&pageSize=10&sortBy=-name,age`."""

    def __init__(
        self,
        page_number: int = Query(default=1, ge=1, alias="pageNumber", description="Page number (1-based)"),
        page_size: int = Query(
            default=settings.default_page_size,
            ge=1,
            alias="pageSize",
            description=f"Items per page (clamped to {settings.max_page_size})",
        ),
        sort_by: str | None = Query(
            default=None, alias="sortBy", description="Comma-separated fields, '-' prefix for descending",
        ),
    ):
        self.page_number = page_number
        self.page_size = page_size
        self.sort_by = sort_by

    def to_pageable(self, pageable_cls: type[PageableT] = Pageable, **filters) -> PageableT:
        return pageable_cls(
            page_number=self.page_number,
            page_size=self.page_size,
            sort_by=self.sort_by,
            **filters,
        )
