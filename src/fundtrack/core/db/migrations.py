"""Migration runner shared by the `fundtrack-migrate` script and tests."""

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head") -> None:
    """Run Alembic migrations synchronously.

    Args:
        revision: Target revision, "head" by default.
    """
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)
