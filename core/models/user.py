# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserCreate: Input for creating a new user
# - UserResponse: A user as returned to clients
# - EmptyResult: Message returned when a listing has nothing to show
# - DeleteResult / DeleteResponse: Outcome of a bulk delete
# =============================================================================

from pydantic import BaseModel, Field, field_validator

from lib.utils import scalar_to_text


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    The username is optional at the schema level; the service performs the
    presence check so failures surface through the route's error message.

    Example:
        {
            "username": "alice"
        }
    """

    username: str | None = Field(
        default=None,
        description="Display name for the user (not required to be unique)"
    )

    # {"username": 123} is stored as "123"
    @field_validator("username", mode="before")
    @classmethod
    def coerce_scalar(cls, value):
        return scalar_to_text(value)


class UserResponse(BaseModel):
    """
    Schema for returning a user to clients.

    Returned by:
    - POST /api/users
    - GET /api/users

    Example:
        {
            "username": "alice",
            "id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    username: str | None = Field(
        default=None,
        description="Display name"
    )

    id: str = Field(
        ...,
        description="Store-assigned user identifier"
    )


class EmptyResult(BaseModel):
    """Message returned instead of an empty list."""

    message: str


class DeleteResult(BaseModel):
    """Store acknowledgement of a bulk delete."""

    acknowledged: bool = True

    deleted_count: int = Field(
        default=0,
        ge=0,
        description="Number of records removed"
    )


class DeleteResponse(BaseModel):
    """
    Response for the administrative bulk-delete endpoints.

    Example:
        {
            "message": "All users have been deleted!",
            "result": {"acknowledged": true, "deleted_count": 3}
        }
    """

    message: str
    result: DeleteResult
