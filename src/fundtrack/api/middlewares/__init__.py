"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from src.fundtrack.core.config import Settings

from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps each added middleware around the previous ones, so the
    last one added runs first. Resulting order, outermost first:
    correlation id, CORS, request logging, rate limiting.
    """
    # Rate limiting - enforces the limiter's default limit on every route
    app.add_middleware(SlowAPIMiddleware)

    # Logging context - needs the correlation id, so it sits inside it
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    # CORS - browsers reject credentials combined with a wildcard origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not settings.cors_allow_all,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)
