"""Service test fixtures — SQLite-backed collaborator + FastAPI test clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The collaborator is injected through create_app(), never patched in
    - raise_app_exceptions=False so catch-all 500 responses reach the test

Design Decisions:
    - StaticPool: all sessions share the one in-memory connection
    - Lifespan is not run by ASGITransport; nothing in these apps needs it
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.config import Settings
from catalog.db.base import Base
from catalog.infrastructure.catalog_service import SqlCatalogService
from catalog.infrastructure.database import DatabaseSessionManager
from catalog.main import create_app
from tests.services.fake_catalog import FakeCatalogService


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool, echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def sql_service(test_engine):
    return SqlCatalogService(DatabaseSessionManager.from_engine(test_engine))


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        health_check_timeout_seconds=0.1,
    )


@pytest.fixture
def fake_service():
    return FakeCatalogService()


async def _client_for(app):
    return AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    )


@pytest.fixture
async def client(sql_service, settings):
    """Client over the SQLite-backed collaborator."""
    async with await _client_for(create_app(sql_service, settings)) as c:
        yield c


@pytest.fixture
async def fake_client(fake_service, settings):
    """Client over the in-memory fake (failure and timing scenarios)."""
    async with await _client_for(create_app(fake_service, settings)) as c:
        yield c
