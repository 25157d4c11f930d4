"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from mockapi.api.v1.health.router import router as health_router
from mockapi.api.v1.posts.router import router as posts_router
from mockapi.api.v1.users.router import router as users_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix)
    app.include_router(health_router)

    app.include_router(users_router)
    app.include_router(posts_router)
