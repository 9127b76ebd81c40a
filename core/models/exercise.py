# =============================================================================
# core/models/exercise.py - Exercise Schemas
# =============================================================================
# These models define the API contract for exercise operations:
# - ExerciseCreate: Input for logging an exercise against a user
# - ExerciseResponse: Echo of the logged exercise
# - LogEntry / ExerciseLog: A user's filtered exercise log
#
# Dates in responses are descriptive strings ("Sun Jan 01 2023");
# the store keeps them as ISO "YYYY-MM-DD".
# =============================================================================

from pydantic import BaseModel, Field, field_validator

from lib.utils import scalar_to_text


class ExerciseCreate(BaseModel):
    """
    Schema for adding an exercise.

    Every field is optional here; the service checks that description and
    duration are present. Duration may be sent as a number or a string
    starting with one ("30", "30 min").

    Example:
        {
            "description": "run",
            "duration": 30,
            "date": "2023-01-01"
        }
    """

    description: str | None = Field(
        default=None,
        description="What was done"
    )

    duration: int | float | str | None = Field(
        default=None,
        description="Duration in minutes"
    )

    # Defaults to today's UTC date when omitted
    date: str | None = Field(
        default=None,
        description="ISO date (YYYY-MM-DD) the exercise took place"
    )

    @field_validator("description", "date", mode="before")
    @classmethod
    def coerce_scalar(cls, value):
        """Numbers and booleans are accepted as their text form."""
        return scalar_to_text(value)


class ExerciseResponse(BaseModel):
    """
    Schema returned after adding an exercise.

    Note that `id` is the owning user's id, not the exercise's.

    Example:
        {
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": "Sun Jan 01 2023",
            "id": "550e8400-e29b-41d4-a716-446655440000"
        }
    """

    username: str | None
    description: str
    duration: int
    date: str
    id: str


class LogEntry(BaseModel):
    """One exercise in a user's log."""

    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """
    A user's exercise log after date filtering and limiting.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "username": "alice",
            "count": 1,
            "log": [{"description": "run", "duration": 30, "date": "Wed Feb 01 2023"}]
        }
    """

    id: str
    username: str | None

    count: int = Field(
        default=0,
        ge=0,
        description="Number of entries in log"
    )

    log: list[LogEntry] = Field(
        default_factory=list,
        description="Matched exercises in storage order"
    )
