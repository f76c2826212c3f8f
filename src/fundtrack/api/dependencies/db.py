"""Database session dependency."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.core.db import get_session


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """Yield a session from the app's engine; released when the request ends.

    `create_app(engine=...)` stores an injected engine on app state; without
    one the process-wide engine is used.
    """
    async with get_session(request.app.state.engine) as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
