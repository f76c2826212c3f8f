"""Alembic environment.

Migrations always run on a synchronous driver: the application's async URL
is rewritten (asyncpg -> psycopg2, aiosqlite -> pysqlite) before connecting.
"""

import os
from logging.config import fileConfig

from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel

from alembic import context
from src.fundtrack.core.config import get_settings

# Registers every table on SQLModel.metadata
import src.fundtrack.models  # noqa: F401

ASYNC_TO_SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}

config = context.config

if config.config_file_name is not None and os.path.exists(config.config_file_name):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = SQLModel.metadata


def sync_database_url() -> str:
    """The migrations URL (or the app URL) with a synchronous driver."""
    settings = get_settings()
    url = make_url(settings.database_migrations_url or settings.database_url)
    driver = ASYNC_TO_SYNC_DRIVERS.get(url.drivername)
    if driver:
        url = url.set(drivername=driver)
    return url.render_as_string(hide_password=False)


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of executing it."""
    context.configure(
        url=sync_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(sync_database_url(), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
                # SQLite cannot ALTER most constraints in place
                render_as_batch=connection.dialect.name == "sqlite",
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
