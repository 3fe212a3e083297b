"""Pagination metadata and the `X-Pagination` response header."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from starlette.datastructures import QueryParams
from starlette.requests import Request
from starlette.responses import Response

from rampaged.core.config import settings
from rampaged.core.paged_list import PagedList
from rampaged.core.pagination import IgnoreInQueryString, Pageable


class ResourceUriType(str, Enum):
    PREVIOUS_PAGE = "previous"
    NEXT_PAGE = "next"
    CURRENT = "current"


_PAGE_OFFSETS = {
    ResourceUriType.PREVIOUS_PAGE: -1,
    ResourceUriType.NEXT_PAGE: 1,
    ResourceUriType.CURRENT: 0,
}


class PaginationMetadata(BaseModel):
    """Serialized as `{totalCount, pageSize, currentPage, totalPages, previousPageLink, nextPageLink}`."""

    total_count: int | None = None
    page_size: int | None = None
    current_page: int | None = None
    total_pages: int | None = None
    previous_page_link: str | None = None
    next_page_link: str | None = None

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def _scalar(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def query_string_data(pageable: Pageable) -> dict[str, Any]:
    """Flat `alias -> value` mapping of every field that belongs in a link.

    Sequence values (lists, tuples, sets) are kept as lists and rendered as
    repeated parameters: `tags=a&tags=b`.
    """
    data: dict[str, Any] = {}
    for name, field in type(pageable).model_fields.items():
        if any(isinstance(meta, IgnoreInQueryString) for meta in field.metadata):
            continue
        value = getattr(pageable, name)
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            data[field.alias or name] = [_scalar(item) for item in value]
        else:
            data[field.alias or name] = _scalar(value)
    return data


def _query_pairs(data: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
    for key, value in data.items():
        for item in value if isinstance(value, list) else [value]:
            yield key, str(item)


def create_resource_uri(
    request: Request | None,
    route_name: str | None,
    uri_type: ResourceUriType,
    pageable: Pageable | None,
    path_params: Mapping[str, Any] | None = None,
) -> str:
    """Render ``route_name`` for the page before/after ``pageable``.

    Returns an empty string when there is nothing to render from. The
    caller's ``pageable`` is left untouched.
    """
    if pageable is None or request is None or not route_name or not route_name.strip():
        return ""

    target = pageable.model_copy(
        update={"page_number": pageable.page_number + _PAGE_OFFSETS[uri_type]},
    )
    url = request.url_for(route_name, **(path_params or {}))
    query = QueryParams(list(_query_pairs(query_string_data(target))))
    return str(url.replace(query=str(query)))


def build_pagination_metadata(
    request: Request | None,
    route_name: str | None,
    paged_list: PagedList[Any] | None,
    pageable: Pageable | None,
    path_params: Mapping[str, Any] | None = None,
) -> PaginationMetadata:
    if paged_list is None:
        return PaginationMetadata()

    previous_link = next_link = None
    if paged_list.has_previous:
        previous_link = create_resource_uri(
            request, route_name, ResourceUriType.PREVIOUS_PAGE, pageable, path_params,
        )
    if paged_list.has_next:
        next_link = create_resource_uri(
            request, route_name, ResourceUriType.NEXT_PAGE, pageable, path_params,
        )

    return PaginationMetadata(
        total_count=paged_list.total_count,
        page_size=paged_list.page_size,
        current_page=paged_list.current_page,
        total_pages=paged_list.total_pages,
        previous_page_link=previous_link,
        next_page_link=next_link,
    )


def create_pageable_header(
    response: Response,
    request: Request | None,
    route_name: str | None,
    paged_list: PagedList[Any] | None,
    pageable: Pageable | None,
    header_name: str = settings.pagination_header,
    path_params: Mapping[str, Any] | None = None,
) -> PaginationMetadata:
    """Attach the JSON pagination metadata to ``response`` and return it."""
    metadata = build_pagination_metadata(request, route_name, paged_list, pageable, path_params)
    response.headers[header_name] = metadata.model_dump_json(by_alias=True)
    return metadata
