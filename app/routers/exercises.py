# =============================================================================
# app/routers/exercises.py - Exercise Endpoints
# =============================================================================
# Handles logging exercises, reading a user's exercise log and the
# administrative bulk delete.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Query, Request

from app.exceptions import route_failure
from app.request_body import parse_body
from core.models.exercise import ExerciseCreate
from core.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)

router = APIRouter()

DELETE_EXERCISES_FAILED = "Deleting all exercises failed!"
CREATE_EXERCISE_FAILED = "Exercise creation failed!"
GET_LOG_FAILED = "Error getting the user's exercise log."


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/exercises/delete")
async def delete_all_exercises():
    """
    Delete all exercises.

    Administrative endpoint.
    """
    logger.info("### DELETE ALL EXERCISES ###")

    try:
        return ExerciseService.delete_all_exercises()
    except Exception as e:
        raise route_failure(DELETE_EXERCISES_FAILED, e) from e


@router.post(
    "/users/{user_id}/exercises",
    openapi_extra={"requestBody": {"content": {
        "application/json": {"schema": ExerciseCreate.model_json_schema()},
        "application/x-www-form-urlencoded": {"schema": ExerciseCreate.model_json_schema()},
    }}},
)
async def add_exercise(
    user_id: Annotated[str, Path(description="User id")],
    request: Request,
):
    """
    Add an exercise to a user's log.

    Accepts a JSON or form body with `description`, `duration` and an
    optional `date`, which defaults to today (UTC). The response `id` is
    the user's id.
    """
    logger.info("### ADD A NEW EXERCISE ###")

    try:
        body = await parse_body(request, ExerciseCreate)
        return ExerciseService.add_exercise(
            user_id,
            description=body.description,
            duration=body.duration,
            date=body.date,
        )
    except Exception as e:
        raise route_failure(CREATE_EXERCISE_FAILED, e) from e


@router.get("/users/{user_id}/logs")
async def get_exercise_log(
    user_id: Annotated[str, Path(description="User id")],
    date_from: Annotated[str | None, Query(alias="from", description="Earliest date (YYYY-MM-DD)")] = None,
    date_to: Annotated[str | None, Query(alias="to", description="Latest date (YYYY-MM-DD)")] = None,
    limit: Annotated[str | None, Query(description="Maximum number of entries")] = None,
):
    """
    Get a user's exercise log.

    Both date bounds are inclusive. A missing or non-numeric limit
    returns every matching entry.
    """
    logger.info("### GET THE LOG FROM A USER ###")

    try:
        return ExerciseService.get_exercise_log(
            user_id,
            date_from=date_from,
            date_to=date_to,
            limit=limit,
        )
    except Exception as e:
        # The legacy API answered 500 here and 200 everywhere else
        raise route_failure(GET_LOG_FAILED, e, legacy_status_code=500) from e
