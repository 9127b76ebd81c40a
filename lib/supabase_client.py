# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for:
# - Users: insert, fetch by id, list, bulk delete
# - Exercises: insert, date-range log query, bulk delete
# - Table checks used by the landing page and readiness checks
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   user = SupabaseClient.fetch_user(user_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST refuses an unfiltered DELETE, so bulk deletes filter on an id
# that can never exist.
NIL_UUID = "00000000-0000-0000-0000-000000000000"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and a suggestion telling HOW to fix, not just WHAT failed.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        user = SupabaseClient.insert_user("alice")
        log = SupabaseClient.fetch_exercises(
            user["id"], date_from="2023-01-01", date_to="2023-12-31", limit=5
        )
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def _normalize_uuid(cls, uuid_value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(uuid_value) if isinstance(uuid_value, UUID) else uuid_value

    @classmethod
    def _is_uuid(cls, value: str) -> bool:
        # Only the canonical hyphenated form; Postgres rejects "urn:uuid:..." and braces
        try:
            return str(UUID(value)) == value.lower()
        except (AttributeError, TypeError, ValueError):
            return False

    @classmethod
    def _delete_all(cls, table: str) -> int:
        client = cls.get_client()
        response = (
            client.table(table)
            .delete(count="exact")
            .neq("id", NIL_UUID)
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def insert_user(cls, username: str) -> dict[str, Any]:
        """
        Insert a new user.

        Args:
            username: Display name (duplicates allowed)

        Returns:
            Inserted user dict with generated id

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.USERS_TABLE)
                .insert({"username": username})
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert user: {e}",
                code="INSERT_USER_FAILED",
                details={"username": username}
            ) from e

    @classmethod
    def fetch_user(cls, user_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a user by ID.

        Args:
            user_id: The user UUID

        Returns:
            User dict with id and username, or None if not found.
            Ids that aren't UUIDs can't exist and also return None.

        Raises:
            SupabaseClientError: If query fails
        """
        user_id_str = cls._normalize_uuid(user_id)
        if not cls._is_uuid(user_id_str):
            return None

        client = cls.get_client()

        try:
            response = (
                client.table(settings.USERS_TABLE)
                .select("id, username")
                .eq("id", user_id_str)
                .limit(1)
                .execute()
            )

            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                suggestion="Check that the users table is accessible",
                details={"user_id": user_id_str}
            ) from e

    @classmethod
    def fetch_users(cls) -> list[dict[str, Any]]:
        """
        Fetch every user in natural storage order.

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.USERS_TABLE)
                .select("id, username")
                .execute()
            )
            users = response.data or []
            logger.debug(f"Fetched {len(users)} users")
            return users

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch users: {e}",
                code="FETCH_USERS_FAILED",
                suggestion="Check that the users table is accessible"
            ) from e

    @classmethod
    def delete_all_users(cls) -> int:
        """
        Delete every user. Exercises are left in place.

        Returns:
            Number of deleted rows

        Raises:
            SupabaseClientError: If delete fails
        """
        try:
            return cls._delete_all(settings.USERS_TABLE)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete users: {e}",
                code="DELETE_USERS_FAILED"
            ) from e

    # -------------------------------------------------------------------------
    # Exercises
    # -------------------------------------------------------------------------

    @classmethod
    def insert_exercise(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new exercise.

        Args:
            data: Row with user_id, username, description, duration, date

        Returns:
            Inserted exercise dict with generated id

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(settings.EXERCISES_TABLE)
                .insert(data)
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert exercise: {e}",
                code="INSERT_EXERCISE_FAILED",
                details={"user_id": data.get("user_id")}
            ) from e

    @classmethod
    def fetch_exercises(
        cls,
        user_id: str | UUID,
        date_from: str,
        date_to: str,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """
        Fetch a user's exercises whose date lies in [date_from, date_to].

        Dates are ISO strings compared as text, which matches calendar
        order for YYYY-MM-DD. No ordering is applied.

        Args:
            user_id: The owning user UUID
            date_from: Inclusive lower bound (YYYY-MM-DD)
            date_to: Inclusive upper bound (YYYY-MM-DD)
            limit: Maximum rows to return, None for all

        Returns:
            List of dicts with description, duration and date

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        user_id_str = cls._normalize_uuid(user_id)

        try:
            query = (
                client.table(settings.EXERCISES_TABLE)
                .select("description, duration, date")
                .eq("user_id", user_id_str)
                .gte("date", date_from)
                .lte("date", date_to)
            )
            if limit:
                query = query.limit(limit)

            response = query.execute()
            exercises = response.data or []
            logger.debug(f"Fetched {len(exercises)} exercises for user {user_id_str}")
            return exercises

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch exercises: {e}",
                code="FETCH_EXERCISES_FAILED",
                details={
                    "user_id": user_id_str,
                    "from": date_from,
                    "to": date_to,
                    "limit": limit,
                }
            ) from e

    @classmethod
    def delete_all_exercises(cls) -> int:
        """
        Delete every exercise.

        Returns:
            Number of deleted rows

        Raises:
            SupabaseClientError: If delete fails
        """
        try:
            return cls._delete_all(settings.EXERCISES_TABLE)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete exercises: {e}",
                code="DELETE_EXERCISES_FAILED"
            ) from e

    # -------------------------------------------------------------------------
    # Table Checks
    # -------------------------------------------------------------------------

    @classmethod
    def check_table(cls, table: str) -> None:
        """
        Run a one-row select to confirm a table exists and is reachable.

        Raises:
            SupabaseClientError: If the table can't be queried
        """
        client = cls.get_client()

        try:
            client.table(table).select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Table '{table}' is not reachable: {e}",
                code="TABLE_UNAVAILABLE",
                suggestion="Apply supabase/migrations/0001_exercise_tracker.sql to the project",
                details={"table": table}
            ) from e
