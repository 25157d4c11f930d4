"""
Main FastAPI application entry point.

Run with ``python -m mockapi.main``, the ``mockapi`` console script, or
any ASGI server pointed at ``mockapi.main:app``.
"""

import uvicorn

from mockapi.application import create_app
from mockapi.config import get_settings
from mockapi.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured address."""
    settings = get_settings()
    uvicorn.run(
        "mockapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        log_config=None,
    )


if __name__ == "__main__":
    run()
