"""
Dependency injection for the API layer.

FastAPI Depends wrapped in typing.Annotated aliases, so endpoints can
declare ``service: UserServiceDep``.
"""

from typing import Annotated

from fastapi import Depends

from mockapi.services import PostService, UserService


def get_user_service() -> UserService:
    """
    Get a user service.

    Returns:
        A fresh UserService (services are stateless)
    """
    return UserService()


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
"""Injected UserService."""


def get_post_service() -> PostService:
    """
    Get a post service.

    Returns:
        A fresh PostService (services are stateless)
    """
    return PostService()


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
"""Injected PostService."""
