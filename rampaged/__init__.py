"""rampaged — pagination and sorting helpers for SQLAlchemy + FastAPI services."""

from rampaged.core.exceptions import AppException, InvalidSortError, ValidationError
from rampaged.core.links import (
    PaginationMetadata,
    ResourceUriType,
    build_pagination_metadata,
    create_pageable_header,
    create_resource_uri,
    query_string_data,
)
from rampaged.core.ordering import (
    Direction,
    EntityDescriptor,
    FieldAlias,
    SortTerm,
    build_order_by,
    order_by_if,
    parse_sort,
    resolve_ordering,
    sort_by_if,
)
from rampaged.core.paged_list import PagedList
from rampaged.core.pagination import IgnoreInQueryString, Pageable, PaginationParams
from rampaged.core.query import (
    count_query,
    include_if,
    map_items,
    paged,
    to_paged_list,
    to_paged_list_async,
    where_if,
)
from rampaged.core.registration import PagedPolicyBuilder, PagedPolicyOptions, add_paged, get_paged_options

__version__ = "1.0.0"

__all__ = [
    "AppException",
    "Direction",
    "EntityDescriptor",
    "FieldAlias",
    "IgnoreInQueryString",
    "InvalidSortError",
    "PagedList",
    "PagedPolicyBuilder",
    "PagedPolicyOptions",
    "Pageable",
    "PaginationMetadata",
    "PaginationParams",
    "ResourceUriType",
    "SortTerm",
    "ValidationError",
    "add_paged",
    "build_order_by",
    "build_pagination_metadata",
    "count_query",
    "create_pageable_header",
    "create_resource_uri",
    "get_paged_options",
    "include_if",
    "map_items",
    "order_by_if",
    "paged",
    "parse_sort",
    "query_string_data",
    "resolve_ordering",
    "sort_by_if",
    "to_paged_list",
    "to_paged_list_async",
    "where_if",
]
