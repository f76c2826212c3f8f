"""Operational endpoints: database health check and Prometheus metrics."""

import secrets
import time
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.fundtrack.core.config import Settings
from src.fundtrack.core.db import get_session
from src.fundtrack.core.logging import get_logger

logger = get_logger(__name__)


async def check_database(request: Request) -> dict[str, Any]:
    """Ping the database behind the app's engine."""
    report: dict[str, Any] = {"status": "healthy", "database": "unknown", "timestamp": time.time()}
    try:
        async with get_session(request.app.state.engine) as session:
            await session.execute(text("SELECT 1"))
        report["database"] = "healthy"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check failed", error=str(e))
        report["database"] = f"unhealthy: {e}"
        report["status"] = "unhealthy"
    return report


def setup_health_endpoint(app: FastAPI) -> None:
    """Configure the health check endpoint."""

    @app.get("/health", include_in_schema=False)
    async def health(request: Request) -> JSONResponse:
        """200 when the database answers, 503 otherwise."""
        report = await check_database(request)
        status_code = 200 if report["status"] == "healthy" else 503
        return JSONResponse(content=report, status_code=status_code)


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Instrument the app and expose /metrics, key-protected when configured."""
    instrumentator = Instrumentator().instrument(app)

    if not settings.metrics_api_key:
        instrumentator.expose(app, endpoint="/metrics", include_in_schema=False)
        return

    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)
    expected_key = settings.metrics_api_key

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(
        app,
        endpoint="/metrics",
        include_in_schema=False,
        dependencies=[Depends(verify_metrics_key)],
    )
