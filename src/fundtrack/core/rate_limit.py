"""Fixed-window rate limiting built on slowapi.

Every route shares one default limit of RATE_LIMIT_MAX requests per
RATE_LIMIT_WINDOW_SECONDS per client IP, enforced by SlowAPIMiddleware.
Counters live in memory unless RATE_LIMIT_STORAGE_URI points at a shared
backend. Disabled unless RATE_LIMIT_ENABLED is set, and always disabled in
the testing environment.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from src.fundtrack.core.config import Settings, get_settings
from src.fundtrack.core.logging import get_logger

logger = get_logger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


def get_rate_limit_key(request: Request) -> str:
    """Generate rate limit key from client IP only."""
    return get_remote_address(request) or "unknown"


def default_limit(settings: Settings) -> str:
    """Render the configured window as a `limits` rate string."""
    return f"{settings.rate_limit_max} per {settings.rate_limit_window_seconds} seconds"


def create_limiter(settings: Settings | None = None) -> Limiter:
    """Create the fixed-window limiter for the application."""
    if settings is None:
        settings = get_settings()

    enabled = settings.rate_limit_enabled and settings.app_env != "testing"
    if not enabled:
        logger.info("Rate limiter disabled")

    kwargs = {}
    if settings.rate_limit_storage_uri:
        kwargs["storage_uri"] = settings.rate_limit_storage_uri

    return Limiter(
        key_func=get_rate_limit_key,
        default_limits=[default_limit(settings)],
        strategy="fixed-window",
        headers_enabled=True,
        enabled=enabled,
        **kwargs,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Reject the request with a plain-text 429 and the window headers."""
    logger.warning(
        "Rate limit exceeded",
        client_ip=get_rate_limit_key(request),
        path=request.url.path,
        limit=str(exc.detail),
    )
    response = PlainTextResponse(RATE_LIMIT_MESSAGE, status_code=429)
    return request.app.state.limiter._inject_headers(response, request.state.view_rate_limit)
