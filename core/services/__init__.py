# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .exercise_service import ExerciseService

__all__ = [
    "UserService",
    "ExerciseService",
]
