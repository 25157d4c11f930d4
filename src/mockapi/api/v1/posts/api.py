"""
Post API endpoints.

Mocked CRUD over posts. Reads return fixed sample data, writes echo the
submitted post back. Updates and deletes of a post id above 100 answer
404, as if the post did not exist.
"""

from fastapi import APIRouter, HTTPException, Response, status
from loguru import logger

from mockapi.api.v1.posts.models import Post
from mockapi.di import PostServiceDep
from mockapi.models.shared import PathId
from mockapi.services import ResourceNotFoundError

router = APIRouter()


@router.get("", response_model=list[Post], summary="List posts")
async def list_posts(service: PostServiceDep) -> list[Post]:
    """Return the two sample posts."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=Post, summary="Get a post")
async def get_post(post_id: PathId, service: PostServiceDep) -> Post:
    """
    Get a post by id.

    Every integer id resolves to the same sample post carrying that id.
    """
    return await service.get_post(post_id)


@router.post("", response_model=Post, summary="Create a post")
async def create_post(post: Post, service: PostServiceDep) -> Post:
    """
    Create a post.

    The submitted id is ignored and replaced by 1.

    Args:
        post: Post to create
        service: Post service (injected)

    Returns:
        The submitted post with its assigned id
    """
    return await service.create_post(post)


@router.put(
    "/{post_id}",
    response_model=Post,
    summary="Update a post",
    responses={404: {"description": "Post not found (id above 100)"}},
)
async def update_post(post_id: PathId, post: Post, service: PostServiceDep) -> Post:
    """
    Update a post.

    Args:
        post_id: Post identifier
        post: New post data
        service: Post service (injected)

    Returns:
        The submitted post carrying the path id

    Raises:
        HTTPException: If the post does not exist (404)
    """
    try:
        return await service.update_post(post_id, post)
    except ResourceNotFoundError as e:
        logger.warning(f"Update rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a post",
    responses={404: {"description": "Post not found (id above 100)"}},
)
async def delete_post(post_id: PathId, service: PostServiceDep) -> Response:
    """
    Delete a post.

    Raises:
        HTTPException: If the post does not exist (404)
    """
    try:
        await service.delete_post(post_id)
    except ResourceNotFoundError as e:
        logger.warning(f"Delete rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
