"""
Shared test fixtures.

Each test gets a fresh in-memory SQLite database (via aiosqlite) with foreign
keys enforced, and the app's session dependency is pointed at it.
"""
import os

# Settings are read at import time by db.session, so these must be set first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-with-at-least-32-bytes")

from collections.abc import AsyncGenerator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from api.main import app  # noqa: E402
from db.session import get_async_session  # noqa: E402
from models import Base  # noqa: E402

TEST_PASSWORD = "correct horse battery staple"


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database shared by every session in the test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """A session for calling the service layer directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def anon_client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """HTTP client with no Authorization header."""

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = _get_test_session
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _signup_client(anon_client: AsyncClient, email: str) -> AsyncClient:
    """Register a user and return a client that sends their bearer token."""
    response = await anon_client.post(
        "/api/auth/signup",
        json={"email": email, "password": TEST_PASSWORD},
    )
    assert response.status_code == 201, response.text
    token = response.json()["access_token"]
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {token}"},
    )


@pytest.fixture
async def client(anon_client: AsyncClient) -> AsyncGenerator[AsyncClient]:
    """HTTP client authenticated as a freshly registered user."""
    async with await _signup_client(anon_client, "owner@example.com") as ac:
        yield ac


@pytest.fixture
async def other_client(anon_client: AsyncClient) -> AsyncGenerator[AsyncClient]:
    """HTTP client authenticated as a second, unrelated user."""
    async with await _signup_client(anon_client, "other@example.com") as ac:
        yield ac
