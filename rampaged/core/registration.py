"""One-time wiring of rampaged into a FastAPI app."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import FastAPI, Request
from pydantic import BaseModel

from rampaged.core.config import settings
from rampaged.core.exceptions import register_exception_handlers

logger = logging.getLogger(__name__)


class PagedPolicyOptions(BaseModel):
    """Options handed to the `add_paged` configure callback.

    Reserved for paging policy. Only the header name is consumed today.
    """

    pagination_header: str = settings.pagination_header

    model_config = {"validate_assignment": True}


class PagedPolicyBuilder:
    def __init__(self, app: FastAPI, options: PagedPolicyOptions):
        if app is None:
            raise ValueError("app is required")
        self.app = app
        self.options = options


def add_paged(
    app: FastAPI,
    configure: Callable[[PagedPolicyOptions], None] | None = None,
) -> PagedPolicyBuilder:
    """Store paging options on ``app.state`` and register error handlers."""
    if app is None:
        raise ValueError("app is required")

    options = PagedPolicyOptions()
    if configure is not None:
        configure(options)

    app.state.rampaged = options
    register_exception_handlers(app)
    logger.debug("rampaged registered: %s", options.model_dump())
    return PagedPolicyBuilder(app, options)


def get_paged_options(request: Request) -> PagedPolicyOptions:
    """FastAPI dependency returning the options stored by `add_paged`."""
    return getattr(request.app.state, "rampaged", None) or PagedPolicyOptions()
