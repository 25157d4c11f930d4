"""Post request and response models."""

from pydantic import BaseModel, ConfigDict, Field

from mockapi.models.shared import Int32


class Post(BaseModel):
    """
    A post record.

    Used both as the request body of POST/PUT and as the response.
    ``user_id`` is never checked against existing users.

    Attributes:
        id: Post identifier (overwritten by the server on write)
        user_id: Author identifier
        title: Post title
        body: Post content
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "user_id": 1,
                "title": "First Post",
                "body": "Hello world",
            }
        },
    )

    id: Int32 = Field(..., description="Post identifier")
    user_id: Int32 = Field(..., description="Author identifier")
    title: str = Field(..., description="Post title")
    body: str = Field(..., description="Post content")
