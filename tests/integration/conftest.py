"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database with the schema created
from SQLModel metadata and the status catalogue seeded. The app is built
around that engine so requests and fixtures see the same data.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.fundtrack.main import create_app
from src.fundtrack.models import StatusDefinition
from tests.helpers import STATUS_DEFINITIONS

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a private in-memory database with tables and status catalogue."""
    # StaticPool keeps the single in-memory connection alive across sessions
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(test_engine) as session:
        session.add_all(
            StatusDefinition(
                status_id=status_id,
                status=label,
                percentage_completion=pct,
                active=active,
            )
            for status_id, label, pct, active in STATUS_DEFINITIONS
        )
        await session.commit()

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for arranging and checking database state.

    The session does not auto-commit; helpers in tests/helpers.py commit
    what they create.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create test client bound to the test engine."""
    app = create_app(engine=engine)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
async def lenient_client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Client that returns 500 responses instead of re-raising app errors."""
    app = create_app(engine=engine)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
