"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    There are no resources to open or close; startup and shutdown are
    only logged.

    Args:
        app: FastAPI application instance
    """
    logger.info(" Starting mock API...")
    logger.info(f"Application version: {app.version}")

    yield

    logger.info(" Shutting down mock API...")
