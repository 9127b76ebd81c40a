# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User create/read schemas and bulk-delete results
# - exercise.py: Exercise create schema and exercise log schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    DeleteResponse,
    DeleteResult,
    EmptyResult,
    UserCreate,
    UserResponse,
)

from .exercise import (
    ExerciseCreate,
    ExerciseLog,
    ExerciseResponse,
    LogEntry,
)

__all__ = [
    # User
    "DeleteResponse",
    "DeleteResult",
    "EmptyResult",
    "UserCreate",
    "UserResponse",
    # Exercise
    "ExerciseCreate",
    "ExerciseLog",
    "ExerciseResponse",
    "LogEntry",
]
