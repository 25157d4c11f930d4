"""
API v1 endpoints.

Route prefix constants for the resource routers. Health endpoints live
at the root and take no prefix.
"""

API_V1_PREFIX: str = ""

USERS_PREFIX: str = f"{API_V1_PREFIX}/users"
POSTS_PREFIX: str = f"{API_V1_PREFIX}/posts"

__all__ = [
    "API_V1_PREFIX",
    "USERS_PREFIX",
    "POSTS_PREFIX",
]
