"""Request logging middleware: correlation context plus one access line per request."""

import time

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.fundtrack.core.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger("fundtrack.access")


async def logging_context_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id, method and path to the log context and log the outcome.

    Unhandled errors are logged by the exception handlers, so only requests
    that produce a response get an access line here.
    """
    clear_request_context()
    bind_request_context(correlation_id.get(), method=request.method, path=request.url.path)
    started = time.perf_counter()
    try:
        response = await call_next(request)
        logger.info(
            "Request handled",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response
    finally:
        clear_request_context()
