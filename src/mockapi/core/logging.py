"""
Loguru configuration for the application.

- Trace ID of the current request in every log line
- Level and format taken from settings
- Standard library logs (uvicorn, fastapi) redirected to loguru
"""

import logging
import sys
from typing import Any

from loguru import logger

from mockapi.config import settings
from mockapi.core.trace_context import trace_id_context
from mockapi.core.uvicorn_filters import HealthCheckFilter

__all__ = ["logger", "InterceptHandler", "intercept_standard_logging"]

INTERCEPTED_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
)


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id of the current request to the log record.

    Args:
        record: Loguru record

    Returns:
        True, the record is never filtered out
    """
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True


def configure_logger() -> None:
    """Replaces the default loguru handler with one built from settings."""
    logger.remove()

    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=settings.log_format,
        filter=add_trace_id,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=settings.debug,
        enqueue=settings.logger_enqueue,
    )


configure_logger()


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging records to loguru.

    Usage:
        logging.getLogger("uvicorn").handlers = [InterceptHandler()]
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """
    Redirects uvicorn and fastapi logs to loguru.

    Health check requests are dropped from the uvicorn access log.
    Safe to call more than once.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

    for logger_name in INTERCEPTED_LOGGERS:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
