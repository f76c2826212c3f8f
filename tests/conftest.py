"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

# Set APP_ENV to testing before any app imports to disable rate limiting
os.environ.setdefault("APP_ENV", "testing")
# Tests run against in-memory SQLite; the engine fixture injects its own engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import Generator

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.fundtrack.core.config import get_settings
from src.fundtrack.core.logging import clear_request_context

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def capturing_logger() -> Generator[CapturingLogger]:
    """Route structlog output to an in-memory logger for assertions."""
    cap_logger = CapturingLogger()

    # Save original configuration to restore later
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)
