"""User request and response models."""

from pydantic import BaseModel, ConfigDict, Field

from mockapi.models.shared import Int32


class User(BaseModel):
    """
    A user record.

    Used both as the request body of POST/PUT and as the response.
    Types are checked strictly: "5" is not an integer and 5 is not a string.

    Attributes:
        id: User identifier (overwritten by the server on write)
        name: Display name
        email: Contact email
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "example": {"id": 1, "name": "Alice", "email": "alice@example.com"}
        },
    )

    id: Int32 = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact email")
