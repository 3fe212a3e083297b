"""
Shared test fixtures: seeded in-memory SQLite databases (sync + async) and an API client.
Every fixture builds its own engine, so tests never share state.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from rampaged.db.base import Base, build_engine, build_session_factory, get_db
from rampaged.main import create_app
from tests.support import build_rows


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as db:
        db.add_all(build_rows())
        db.commit()
        yield db
    engine.dispose()


@pytest.fixture
async def async_session() -> AsyncIterator:
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = build_session_factory(engine)
    async with factory() as db:
        db.add_all(build_rows())
        await db.commit()
        yield db
    await engine.dispose()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """API client over a seeded in-memory database (includes one soft-deleted order)."""
    engine = build_engine("sqlite+aiosqlite://")
    factory = build_session_factory(engine)

    async def _prepare() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with factory() as db:
            db.add_all(build_rows(include_deleted=True))
            await db.commit()

    async def _get_test_db():
        async with factory() as db:
            yield db

    app = create_app()
    app.dependency_overrides[get_db] = _get_test_db

    with TestClient(app) as test_client:
        test_client.portal.call(_prepare)
        yield test_client
        test_client.portal.call(engine.dispose)
