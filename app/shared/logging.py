"""
Logging configuration for the application.

Sets up structured logging with a consistent format. Every record
carries the trace id of the request being served ("-" outside a
request) so server logs can be matched with error responses.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys
from contextvars import ContextVar

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(trace_id)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


class TraceIdFilter(logging.Filter):
    """Stamp each record with the current request's trace id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = trace_id_context.get() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(TraceIdFilter())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
