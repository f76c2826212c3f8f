"""Database engine management.

PostgreSQL (asyncpg) is the production target. SQLite (aiosqlite) URLs are
accepted for local development and get SQLAlchemy's default pooling.
"""

import ssl
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.fundtrack.core.config import Settings, get_settings

_engine: AsyncEngine | None = None

# DATABASE_SSL_MODE -> (check_hostname, verify_mode)
_SSL_MODES: dict[str, tuple[bool, ssl.VerifyMode]] = {
    "prefer": (False, ssl.CERT_NONE),
    "require": (False, ssl.CERT_NONE),
    "verify-ca": (False, ssl.CERT_REQUIRED),
    "verify-full": (True, ssl.CERT_REQUIRED),
}


def build_ssl_context(ssl_mode: str) -> ssl.SSLContext | None:
    """SSL context for asyncpg, or None when SSL is disabled."""
    if ssl_mode not in _SSL_MODES:
        return None
    check_hostname, verify_mode = _SSL_MODES[ssl_mode]
    context = ssl.create_default_context()
    context.check_hostname = check_hostname
    context.verify_mode = verify_mode
    return context


def _postgres_options(settings: Settings) -> dict[str, Any]:
    connect_args: dict[str, Any] = {
        "statement_cache_size": settings.database_statement_cache_size,
    }
    ssl_context = build_ssl_context(settings.database_ssl_mode)
    if ssl_context is not None:
        connect_args["ssl"] = ssl_context
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "connect_args": connect_args,
    }


def create_engine_from_settings(settings: Settings | None = None) -> AsyncEngine:
    """Build an engine for the configured database URL."""
    if settings is None:
        settings = get_settings()
    options: dict[str, Any] = {"pool_pre_ping": True}
    if make_url(settings.database_url).get_backend_name() == "postgresql":
        options.update(_postgres_options(settings))
    return create_async_engine(settings.database_url, **options)


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_engine_from_settings()
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None
