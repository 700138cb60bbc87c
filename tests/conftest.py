"""
Blog Backend — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped):
    ├── mock_db_session: Mock AsyncSession (no database needed)
    ├── store_engine: In-memory SQLite engine with the posts table created
    ├── broken_store_engine: In-memory SQLite engine WITHOUT the posts table
    ├── test_client: HTTPX AsyncClient wired to the app and store_engine
    ├── failing_client: HTTPX AsyncClient wired to broken_store_engine
    ├── commit_failing_client: HTTPX AsyncClient whose session commits fail
    └── sample_post_data: Post field values
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Settings are read at import time; point them at test values first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DATABASE_KEY"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blogapp.database import Base, get_db_session
from blogapp.main import app
from blogapp.models.post import Post  # noqa: F401


def _memory_engine():
    # StaticPool keeps the single in-memory database alive across sessions
    return create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def _override_session(engine, fail_commit=False):
    """Same commit/rollback contract as get_db_session, bound to `engine`."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _get_session():
        async with factory() as session:
            if fail_commit:
                session.commit = AsyncMock(
                    side_effect=OperationalError("COMMIT", {}, Exception("commit failed"))
                )
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _get_session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value = result
            posts = await post_service.list_posts(mock_db_session)
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
def sample_post_data():
    return {
        "id": uuid4(),
        "title": "Hello",
        "content": "First post on the blog.",
        "created_at": datetime.now(timezone.utc),
    }


@pytest_asyncio.fixture
async def store_engine():
    engine = _memory_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def broken_store_engine():
    """A reachable store whose posts table is missing: every query fails."""
    engine = _memory_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(store_engine):
    """
    HTTPX AsyncClient talking to the app in-process.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/posts")
    """
    app.dependency_overrides[get_db_session] = _override_session(store_engine)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(broken_store_engine):
    app.dependency_overrides[get_db_session] = _override_session(broken_store_engine)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def commit_failing_client(store_engine):
    """Working store whose sessions fail at commit time."""
    app.dependency_overrides[get_db_session] = _override_session(store_engine, fail_commit=True)
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
