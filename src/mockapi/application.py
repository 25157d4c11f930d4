"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockapi import __version__
from mockapi.config import get_settings
from mockapi.core.logging import logger
from mockapi.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from mockapi.lifespan import lifespan
from mockapi.middleware import TraceIDMiddleware
from mockapi.openapi import configure_openapi
from mockapi.routes import register_routes


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    # Docs URLs must be set BEFORE creating the FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        # "/users/" is not "/users": no trailing slash redirects
        redirect_slashes=False,
    )

    # Starlette's HTTPException also covers the router's own 404/405
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_middleware(TraceIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    configure_openapi(app)

    logger.info(f" FastAPI application created (v{__version__})")
    logger.debug(f"CORS origins: {settings.get_allowed_origins()}")

    return app
