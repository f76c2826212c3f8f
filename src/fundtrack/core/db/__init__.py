"""Database utilities - engine, session, migrations."""

from src.fundtrack.core.db.engine import (
    create_engine_from_settings,
    dispose_engine,
    get_engine,
)
from src.fundtrack.core.db.migrations import run_migrations_sync
from src.fundtrack.core.db.session import get_session

__all__ = [
    # Engine
    "create_engine_from_settings",
    "dispose_engine",
    "get_engine",
    # Session
    "get_session",
    # Migrations
    "run_migrations_sync",
]
