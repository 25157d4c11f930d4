"""OpenAPI schema customization for the mock API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

API_DESCRIPTION = """
Health checks and mocked CRUD endpoints for users and posts.

Nothing is persisted: reads return fixed sample data and writes echo the
submitted body back with a server-chosen id.

## Errors

Errors are returned as RFC 7807 Problem Details:

- **400**: request body is not valid JSON
- **404**: no such route, or post id above 100 on update/delete
- **422**: missing or mistyped field, or non-integer id in the path
"""


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate the OpenAPI schema once and cache it on the app.

    Args:
        app: The FastAPI application instance.

    Returns:
        OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=API_DESCRIPTION,
        routes=app.routes,
    )
    openapi_schema["tags"] = [
        {"name": "Health", "description": "Liveness and readiness probes"},
        {"name": "Users", "description": "Mocked user resources"},
        {"name": "Posts", "description": "Mocked post resources"},
    ]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Install the customized OpenAPI schema generator on the app.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
