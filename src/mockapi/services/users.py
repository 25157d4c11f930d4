"""
User service.

Serves fixed sample users and echoes writes back. Nothing is stored:
every call builds its result from its own arguments.
"""

from mockapi.api.v1.users.models import User
from mockapi.core.logging import logger

CREATED_USER_ID = 1
SAMPLE_USER_NAME = "Sample User"
SAMPLE_USER_EMAIL = "user@example.com"


class UserService:
    """Mocked user operations."""

    async def list_users(self) -> list[User]:
        return [
            User(id=1, name="Alice", email="alice@example.com"),
            User(id=2, name="Bob", email="bob@example.com"),
        ]

    async def get_user(self, user_id: int) -> User:
        return User(id=user_id, name=SAMPLE_USER_NAME, email=SAMPLE_USER_EMAIL)

    async def create_user(self, user: User) -> User:
        """
        Echo a new user back with the server-assigned id.

        Args:
            user: Submitted user, its id is ignored

        Returns:
            The submitted user with id set to CREATED_USER_ID
        """
        logger.info(f"Creating user {user.name!r}")
        return user.model_copy(update={"id": CREATED_USER_ID})

    async def update_user(self, user_id: int, user: User) -> User:
        """
        Echo an updated user back with the id taken from the path.

        Any integer id is accepted.
        """
        logger.info(f"Updating user {user_id}")
        return user.model_copy(update={"id": user_id})

    async def delete_user(self, user_id: int) -> None:
        # Any integer id is accepted
        logger.info(f"Deleting user {user_id}")
