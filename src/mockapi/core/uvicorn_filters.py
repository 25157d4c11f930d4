"""Logging filters for the uvicorn access log."""

import logging


class HealthCheckFilter(logging.Filter):
    """
    Drops access log lines for health check probes.

    Uvicorn access lines look like:
        10.0.12.168:43306 - "GET /health/ready HTTP/1.1" 200
    """

    EXCLUDED_PATHS = frozenset({"/health", "/health/ready", "/favicon.ico"})

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()

        for path in self.EXCLUDED_PATHS:
            if f" {path} " in message or f" {path}?" in message:
                return False

        return True
