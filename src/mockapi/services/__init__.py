"""Services providing the mocked resource data."""

from mockapi.services.errors import ResourceNotFoundError
from mockapi.services.posts import MAX_POST_ID, PostService
from mockapi.services.users import UserService

__all__ = [
    "MAX_POST_ID",
    "PostService",
    "ResourceNotFoundError",
    "UserService",
]
