"""
Supermatech Backend: Test Configuration (conftest.py)
=======================================================

What:  Shared pytest fixtures for the whole suite.

Fixture Inventory (all function-scoped):
    ├── memory_store: fresh InMemoryOrderLineStore
    ├── mock_db_session: AsyncMock standing in for an AsyncSession
    ├── sample_order_line: valid OrderLine payload without id
    ├── sql_engine: aiosqlite in-memory engine with the schema created
    ├── sql_session: AsyncSession bound to sql_engine
    ├── memory_client: HTTPX client, app wired to memory_store
    └── sql_client: HTTPX client, app wired to sql_engine
"""

import os

# Must run before any supermatech import: settings and the engine read these
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CLIENT_APP_NAME"] = "supermatechApp"
os.environ["ENABLE_TRANSLATION"] = "true"

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from supermatech.database import Base, get_db_session
from supermatech.main import create_app
from supermatech.models.order_line import OrderLine  # noqa: F401
from supermatech.routes.order_lines import get_order_line_store
from supermatech.storage.memory_store import InMemoryOrderLineStore


@pytest.fixture
def memory_store():
    return InMemoryOrderLineStore()


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception())
        store = SqlAlchemyOrderLineStore(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_order_line():
    return {"product_name": "Organic apples 1kg", "quantity": 2, "unit_price": 3.5}


@pytest_asyncio.fixture
async def sql_engine():
    """
    In-memory SQLite engine with the order_line table created.

    StaticPool keeps a single connection, so every session sees the same
    in-memory database.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_session(sql_engine):
    factory = async_sessionmaker(sql_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def memory_client(memory_store):
    """
    HTTPX AsyncClient talking to a fresh app whose store is memory_store.

    Usage:
        async def test_list(memory_client):
            response = await memory_client.get("/api/order-lines")
            assert response.status_code == 200
    """
    app = create_app()
    app.dependency_overrides[get_order_line_store] = lambda: memory_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sql_client(sql_engine):
    """HTTPX AsyncClient over the real SQL store, backed by sql_engine."""
    factory = async_sessionmaker(sql_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
