# =============================================================================
# core/services/exercise_service.py - Exercise Business Logic
# =============================================================================
# Handles logging exercises against a user and building the user's
# exercise log:
# - Date range defaults (epoch .. today, UTC)
# - Limit parsing (absent, non-numeric or 0 means unlimited)
# - Projection of stored rows to descriptive log entries
# =============================================================================

import logging
from typing import Any

from lib.dates import EPOCH_ISO, describe_date, today_iso
from lib.supabase_client import SupabaseClient
from lib.utils import parse_leading_int
from core.models.exercise import ExerciseLog, ExerciseResponse, LogEntry
from core.models.user import DeleteResponse, DeleteResult
from core.services.user_service import UserService
from app.exceptions import MissingFieldError

logger = logging.getLogger(__name__)

EXERCISES_DELETED_MESSAGE = "All exercises have been deleted!"


def parse_limit(raw: Any) -> int | None:
    """
    Turn a raw limit query value into a row cap.

    A negative limit caps at its magnitude ("-2" keeps two rows).

    Returns:
        A positive limit, or None for "no limit"

    Example:
        parse_limit("5")    # 5
        parse_limit("-2")   # 2
        parse_limit("abc")  # None
        parse_limit("0")    # None
    """
    limit = parse_leading_int(raw)
    if not limit:
        return None
    return abs(limit)


def to_log_entry(row: dict[str, Any]) -> LogEntry:
    """Project a stored exercise row to a log entry with a descriptive date."""
    return LogEntry(
        description=row.get("description"),
        duration=row.get("duration"),
        date=describe_date(row.get("date")),
    )


class ExerciseService:
    """
    Service for exercise operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def add_exercise(
        user_id: str,
        description: str | None,
        duration: Any,
        date: str | None = None,
    ) -> ExerciseResponse:
        """
        Log an exercise for a user.

        Args:
            user_id: The owning user's id
            description: What was done (required)
            duration: Minutes; parsed as a leading integer (required)
            date: ISO date, defaults to today (UTC)

        Returns:
            The logged exercise, with `id` set to the user's id

        Raises:
            UserNotFoundError: If the user doesn't exist
            MissingFieldError: If description or duration is missing
            SupabaseClientError: If the insert fails
        """
        logger.info(f"Looking for user with id [{user_id}] ...")
        user = UserService.get_user(user_id)

        if description is None or not description.strip():
            raise MissingFieldError("description")

        minutes = parse_leading_int(duration)
        if minutes is None:
            raise MissingFieldError("duration")

        if not date:
            date = today_iso()

        exercise = SupabaseClient.insert_exercise({
            "user_id": str(user["id"]),
            "username": user.get("username"),
            "description": description,
            "duration": minutes,
            "date": date,
        })
        logger.info(f"Created exercise: {exercise.get('id')} for user: {user['id']}")

        return ExerciseResponse(
            username=user.get("username"),
            description=exercise.get("description", description),
            duration=exercise.get("duration", minutes),
            date=describe_date(exercise.get("date", date)),
            id=str(user["id"]),
        )

    @staticmethod
    def get_exercise_log(
        user_id: str,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: Any = None,
    ) -> ExerciseLog:
        """
        Build a user's exercise log.

        Matches exercises whose ISO date lies in [date_from, date_to]
        (inclusive, compared as strings) and keeps at most `limit` of
        them in storage order.

        Args:
            user_id: The user's id
            date_from: Lower bound, defaults to 1970-01-01
            date_to: Upper bound, defaults to today (UTC)
            limit: Row cap; absent, non-numeric or 0 means unlimited, negatives use their magnitude

        Returns:
            ExerciseLog with id, username, count and log entries

        Raises:
            UserNotFoundError: If the user doesn't exist
            SupabaseClientError: If the query fails
        """
        user = UserService.get_user(user_id)

        date_from = date_from or EPOCH_ISO
        date_to = date_to or today_iso()
        max_rows = parse_limit(limit)

        logger.info(f"Looking for exercises with id [{user_id}] from {date_from} to {date_to}")
        rows = SupabaseClient.fetch_exercises(
            user["id"],
            date_from=date_from,
            date_to=date_to,
            limit=max_rows,
        )

        # The store applies the limit; trim again in case it was ignored
        if max_rows is not None:
            rows = rows[:max_rows]

        log = [to_log_entry(row) for row in rows]

        return ExerciseLog(
            id=str(user["id"]),
            username=user.get("username"),
            count=len(log),
            log=log,
        )

    @staticmethod
    def delete_all_exercises() -> DeleteResponse:
        """Delete every exercise."""
        deleted = SupabaseClient.delete_all_exercises()
        logger.info(f"Deleted {deleted} exercises")

        return DeleteResponse(
            message=EXERCISES_DELETED_MESSAGE,
            result=DeleteResult(deleted_count=deleted),
        )
