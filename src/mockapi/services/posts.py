"""
Post service.

Serves fixed sample posts and echoes writes back. Writes to a post id
above MAX_POST_ID are treated as writes to a missing post.
"""

from mockapi.api.v1.posts.models import Post
from mockapi.core.logging import logger
from mockapi.services.errors import ResourceNotFoundError

MAX_POST_ID = 100
CREATED_POST_ID = 1


class PostService:
    """Mocked post operations."""

    async def list_posts(self) -> list[Post]:
        return [
            Post(id=1, user_id=1, title="First Post", body="Hello world"),
            Post(id=2, user_id=1, title="Second Post", body="Another post"),
        ]

    async def list_posts_by_user(self, user_id: int) -> list[Post]:
        return [Post(id=1, user_id=user_id, title="User Post", body="Content")]

    async def get_post(self, post_id: int) -> Post:
        return Post(id=post_id, user_id=1, title="Sample Post", body="Post body")

    async def create_post(self, post: Post) -> Post:
        logger.info(f"Creating post {post.title!r} for user {post.user_id}")
        return post.model_copy(update={"id": CREATED_POST_ID})

    async def update_post(self, post_id: int, post: Post) -> Post:
        """
        Echo an updated post back with the id taken from the path.

        Args:
            post_id: Post identifier from the path
            post: Submitted post, its id is ignored

        Returns:
            The submitted post with id set to post_id

        Raises:
            ResourceNotFoundError: If post_id is above MAX_POST_ID
        """
        self._ensure_exists(post_id)
        logger.info(f"Updating post {post_id}")
        return post.model_copy(update={"id": post_id})

    async def delete_post(self, post_id: int) -> None:
        """
        Delete a post.

        Raises:
            ResourceNotFoundError: If post_id is above MAX_POST_ID
        """
        self._ensure_exists(post_id)
        logger.info(f"Deleting post {post_id}")

    @staticmethod
    def _ensure_exists(post_id: int) -> None:
        if post_id > MAX_POST_ID:
            raise ResourceNotFoundError("Post", post_id)
