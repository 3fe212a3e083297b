"""RamPaged reference API — FastAPI application factory."""


import logging
import sys

from fastapi import FastAPI

from rampaged import __version__
from rampaged.core.config import settings
from rampaged.core.registration import add_paged
from rampaged.routers.v1.customers import router as customers_v1_router
from rampaged.routers.v1.orders import router as orders_v1_router
from rampaged.schemas.common import HealthResponse


def _configure_logging() -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.is_development else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # --- Paging options + exception handlers ---
    add_paged(app)

    # --- v1 API routes (/api/v1/*) ---
    app.include_router(orders_v1_router, prefix="/api/v1")
    app.include_router(customers_v1_router, prefix="/api/v1")

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env, version=__version__)

    return app


app = create_app()
