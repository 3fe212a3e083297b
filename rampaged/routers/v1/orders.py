"""Order router — paged, sortable listing with the X-Pagination header.

Pattern:
  1. Build the page request from PaginationParams + endpoint filters
  2. Delegate to the service
  3. Attach the pagination header and wrap the page in the list envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from rampaged.core.links import create_pageable_header
from rampaged.core.pagination import PaginationParams
from rampaged.core.registration import PagedPolicyOptions, get_paged_options
from rampaged.core.response import DataResponse, ListResponse, paginated
from rampaged.db.base import get_db
from rampaged.schemas.order import OrderOut, OrderQuery
from rampaged.services.order import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


def _svc(session: AsyncSession) -> OrderService:
    return OrderService(session)


@router.get("", response_model=ListResponse[OrderOut], name="list_orders")
async def list_orders(
    request: Request,
    response: Response,
    filter_status: Optional[str] = Query(default=None, alias="status", description="Filter by status"),
    pagination: PaginationParams = Depends(),
    options: PagedPolicyOptions = Depends(get_paged_options),
    session: AsyncSession = Depends(get_db),
):
    """List orders. Sort with e.g. ?sortBy=-customer,total (customer sorts by last name)."""
    query = pagination.to_pageable(OrderQuery, status=filter_status)
    page = await _svc(session).list_orders(query)
    create_pageable_header(
        response, request, "list_orders", page, query, header_name=options.pagination_header,
    )
    return paginated(page)


@router.get("/{order_id}", response_model=DataResponse[OrderOut])
async def get_order(
    order_id: str,
    session: AsyncSession = Depends(get_db),
):
    order = await _svc(session).get_order(order_id)
    return {"data": OrderOut.model_validate(order)}
