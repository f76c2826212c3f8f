"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.fundtrack.core.db.engine import get_engine


@asynccontextmanager
async def get_session(
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Create a database session bound to the pooled engine.

    Args:
        engine: Optional engine override (injected by the app or tests).

    Yields:
        AsyncSession whose connection returns to the pool on exit.

    Note:
        Any transaction still open when the block exits (for example after an
        exception) is rolled back by the session's close.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
