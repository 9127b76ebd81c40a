# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user creation, listing and bulk deletion.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient
from core.models.user import DeleteResponse, DeleteResult, EmptyResult, UserResponse
from app.exceptions import MissingFieldError, UserNotFoundError

logger = logging.getLogger(__name__)

NO_USERS_MESSAGE = "There are no users in the database!"
USERS_DELETED_MESSAGE = "All users have been deleted!"


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def create_user(username: str | None) -> UserResponse:
        """
        Create a new user.

        Duplicate usernames are allowed and get distinct ids.

        Args:
            username: Display name for the user

        Returns:
            The created user

        Raises:
            MissingFieldError: If username is absent or blank
            SupabaseClientError: If the insert fails
        """
        if username is None or not username.strip():
            raise MissingFieldError("username")

        user = SupabaseClient.insert_user(username)
        logger.info(f"Created user: {user['id']} ({username})")

        return UserResponse(username=user.get("username"), id=str(user["id"]))

    @staticmethod
    def get_user(user_id: str) -> dict[str, Any]:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user doesn't exist
        """
        user = SupabaseClient.fetch_user(user_id)

        if not user:
            raise UserNotFoundError(str(user_id))

        return user

    @staticmethod
    def list_users() -> list[UserResponse] | EmptyResult:
        """
        List every user.

        Returns:
            All users, or an EmptyResult message when there are none
        """
        users = SupabaseClient.fetch_users()

        if not users:
            return EmptyResult(message=NO_USERS_MESSAGE)

        return [UserResponse(username=u.get("username"), id=str(u["id"])) for u in users]

    @staticmethod
    def delete_all_users() -> DeleteResponse:
        """
        Delete every user.

        Exercises are not deleted and may be left orphaned.
        """
        deleted = SupabaseClient.delete_all_users()
        logger.info(f"Deleted {deleted} users")

        return DeleteResponse(
            message=USERS_DELETED_MESSAGE,
            result=DeleteResult(deleted_count=deleted),
        )
