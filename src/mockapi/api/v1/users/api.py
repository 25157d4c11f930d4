"""
User API endpoints.

Mocked CRUD over users. Reads return fixed sample data, writes echo the
submitted user back. Nothing is persisted.
"""

from fastapi import APIRouter, Response, status

from mockapi.api.v1.posts.models import Post
from mockapi.api.v1.users.models import User
from mockapi.di import PostServiceDep, UserServiceDep
from mockapi.models.shared import PathId

router = APIRouter()


@router.get("", response_model=list[User], summary="List users")
async def list_users(service: UserServiceDep) -> list[User]:
    """Return the two sample users (Alice and Bob)."""
    return await service.list_users()


@router.get("/{user_id}", response_model=User, summary="Get a user")
async def get_user(user_id: PathId, service: UserServiceDep) -> User:
    """
    Get a user by id.

    Every integer id resolves to the same sample user carrying that id.

    Args:
        user_id: User identifier
        service: User service (injected)

    Returns:
        Sample user with the requested id
    """
    return await service.get_user(user_id)


@router.post("", response_model=User, summary="Create a user")
async def create_user(user: User, service: UserServiceDep) -> User:
    """
    Create a user.

    The submitted id is ignored and replaced by 1.

    Args:
        user: User to create
        service: User service (injected)

    Returns:
        The submitted user with its assigned id
    """
    return await service.create_user(user)


@router.put("/{user_id}", response_model=User, summary="Update a user")
async def update_user(user_id: PathId, user: User, service: UserServiceDep) -> User:
    """
    Update a user.

    The body id is replaced by the path id.

    Args:
        user_id: User identifier
        user: New user data
        service: User service (injected)

    Returns:
        The submitted user carrying the path id
    """
    return await service.update_user(user_id, user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(user_id: PathId, service: UserServiceDep) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/posts", response_model=list[Post], summary="List user posts")
async def list_user_posts(user_id: PathId, service: PostServiceDep) -> list[Post]:
    """
    List the posts written by a user.

    Args:
        user_id: Author identifier
        service: Post service (injected)

    Returns:
        One sample post attributed to the user
    """
    return await service.list_posts_by_user(user_id)
