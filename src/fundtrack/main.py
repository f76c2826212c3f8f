from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from sqlalchemy.ext.asyncio import AsyncEngine

from src.fundtrack.api.middlewares import setup_middlewares
from src.fundtrack.api.v1.router import api_router
from src.fundtrack.core.config import get_settings
from src.fundtrack.core.db import dispose_engine
from src.fundtrack.core.exceptions import setup_exception_handlers
from src.fundtrack.core.health import setup_health_endpoint, setup_metrics
from src.fundtrack.core.logging import get_logger, setup_logging
from src.fundtrack.core.rate_limit import create_limiter, rate_limit_exceeded_handler

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug, settings.log_level)
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    # An injected engine is owned and disposed by whoever created it
    if app.state.engine is None:
        await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Projects and their status history"},
    {"name": "investors", "description": "Investor records and portfolio rollups"},
    {"name": "investments", "description": "Investments linking investors to projects"},
    {"name": "statuses", "description": "Status catalogue and free-text status updates"},
    {"name": "dashboard", "description": "Read-only aggregates"},
]


def create_app(engine: AsyncEngine | None = None) -> FastAPI:
    """Build the application.

    Args:
        engine: Engine to serve requests from. Defaults to the process-wide
            engine built from settings on first use.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Project funding tracker: projects, investors, investments and status history",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.limiter = create_limiter(settings)

    setup_exception_handlers(app)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
    setup_middlewares(app, settings)

    app.include_router(api_router)
    setup_metrics(app, settings)
    setup_health_endpoint(app)

    return app


app = create_app()


def serve() -> None:
    """Console entry point: run the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "src.fundtrack.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the structlog handler installed by setup_logging
    )
