"""The page container returned by every paging helper."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from rampaged.core.pagination import Pageable

T = TypeVar("T")


class PagedList(Generic[T]):
    """One page of items plus its position in the full result set.

    Behaves like a read-only list of the page's items.
    """

    def __init__(self, items: Sequence[T] | None, total_count: int, page_number: int, page_size: int):
        self.items: list[T] = list(items or [])
        self.total_count = total_count
        self.current_page = page_number
        self.page_size = page_size
        self.total_pages = math.ceil(total_count / page_size) if page_size else 0

    @classmethod
    def from_pageable(cls, items: Sequence[T] | None, total_count: int, pageable: Pageable) -> PagedList[T]:
        return cls(items, total_count, pageable.page_number, pageable.page_size)

    @classmethod
    def create(cls, source: Sequence[T], pageable: Pageable) -> PagedList[T]:
        """Slice an in-memory sequence into a page."""
        start = pageable.skip_count
        return cls.from_pageable(source[start:start + pageable.page_size], len(source), pageable)

    @classmethod
    def empty(cls, pageable: Pageable) -> PagedList[T]:
        return cls.from_pageable([], 0, pageable)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self) -> str:
        return (
            f"PagedList(page={self.current_page}/{self.total_pages}, "
            f"size={self.page_size}, total={self.total_count}, items={len(self.items)})"
        )
