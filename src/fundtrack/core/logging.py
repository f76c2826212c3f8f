"""Structured logging.

Application code logs through structlog. Records from the standard library
(uvicorn, SQLAlchemy, Alembic) are routed through the same processor chain so
every line shares one format and carries the bound request context.
"""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "uvicorn.access": logging.WARNING,  # replaced by our access log line
    "httpx": logging.WARNING,
}


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the standard library root logger.

    Args:
        debug: Coloured console output when True, JSON lines otherwise.
        level: Root level name; defaults to DEBUG in debug mode, else INFO.
    """
    log_level = logging.getLevelName(level.upper()) if level else None
    if not isinstance(log_level, int):
        log_level = logging.DEBUG if debug else logging.INFO

    renderer: structlog.typing.Processor = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    shared = _shared_processors()

    structlog.configure(
        processors=shared + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None, **extra: str) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID for the current request; skipped if None.
        **extra: Additional request attributes such as method and path.
    """
    if request_id:
        bind_contextvars(request_id=request_id)
    if extra:
        bind_contextvars(**extra)


def clear_request_context() -> None:
    clear_contextvars()
