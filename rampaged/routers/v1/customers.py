"""Customer router — the minimal paged listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from rampaged.core.links import create_pageable_header
from rampaged.core.pagination import PaginationParams
from rampaged.core.registration import PagedPolicyOptions, get_paged_options
from rampaged.core.response import ListResponse, paginated
from rampaged.db.base import get_db
from rampaged.schemas.customer import CustomerOut
from rampaged.services.customer import CustomerService

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("", response_model=ListResponse[CustomerOut], name="list_customers")
async def list_customers(
    request: Request,
    response: Response,
    pagination: PaginationParams = Depends(),
    options: PagedPolicyOptions = Depends(get_paged_options),
    session: AsyncSession = Depends(get_db),
):
    pageable = pagination.to_pageable()
    page = await CustomerService(session).list_customers(pageable)
    create_pageable_header(
        response, request, "list_customers", page, pageable, header_name=options.pagination_header,
    )
    return paginated(page)
