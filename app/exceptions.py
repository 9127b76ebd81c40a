# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and a suggestion on how to fix them.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import settings

logger = logging.getLogger(__name__)


class ExerciseTrackerException(Exception):
    """
    Base exception for the Exercise Tracker API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "EXERCISE_TRACKER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Lookup Exceptions
# =============================================================================

class UserNotFoundError(ExerciseTrackerException):
    """Raised when a user ID doesn't resolve to a record."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            status_code=404,
            suggestion="Create the user with POST /api/users and use the returned id",
            details={"user_id": user_id}
        )


# =============================================================================
# Input Exceptions
# =============================================================================

class MissingFieldError(ExerciseTrackerException):
    """Raised when a required field is absent, blank or unparsable."""

    def __init__(self, field: str):
        super().__init__(
            message=f"Missing required field: {field}",
            code="MISSING_FIELD",
            status_code=422,
            suggestion=f"Include a value for '{field}' in the request body",
            details={"field": field}
        )


class InvalidBodyError(ExerciseTrackerException):
    """Raised when a request body can't be decoded or has badly typed fields."""

    def __init__(self, reason: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(
            message=f"Invalid request body: {reason}",
            code="INVALID_BODY",
            status_code=422,
            suggestion="Send a JSON object or an urlencoded form with text fields",
            details={"errors": errors} if errors else None
        )


# =============================================================================
# Route Boundary
# =============================================================================

class OperationFailedError(ExerciseTrackerException):
    """
    Wraps any failure raised while serving a route.

    The message is the route's generic failure message. Code, status and
    suggestion come from the wrapped error when it is one of ours, so a
    missing user still answers 404 while a store outage answers 500.
    `legacy_status_code` is what the legacy API returned for this route.
    """

    def __init__(
        self,
        message: str,
        error: Exception,
        legacy_status_code: int = 200,
    ):
        if isinstance(error, ExerciseTrackerException):
            super().__init__(
                message=message,
                code=error.code,
                status_code=error.status_code,
                suggestion=error.suggestion,
                details=error.details,
            )
        else:
            super().__init__(message=message, code="OPERATION_FAILED")
        self.error = error
        self.legacy_status_code = legacy_status_code


def route_failure(
    message: str,
    error: Exception,
    legacy_status_code: int = 200,
) -> OperationFailedError:
    """
    Log a failure caught in a route and wrap it for the exception handler.

    Must be called from inside the `except` block so the traceback is logged.

    Example:
        try:
            return UserService.create_user(body.username)
        except Exception as e:
            raise route_failure("User creation failed!", e) from e
    """
    if isinstance(error, ExerciseTrackerException):
        logger.warning(f"{message} [{error.code}] {error.message}")
    else:
        logger.exception(f"{message} {error}")
    return OperationFailedError(message, error, legacy_status_code=legacy_status_code)


# =============================================================================
# Exception Handlers
# =============================================================================

async def exercise_tracker_exception_handler(
    request: Request,
    exc: ExerciseTrackerException
) -> JSONResponse:
    """
    Convert ExerciseTrackerException to JSON response.

    In legacy mode only route failures are reshaped, into the
    {"message": ...} body the old API sent.
    """
    if settings.LEGACY_ERROR_RESPONSES and isinstance(exc, OperationFailedError):
        return JSONResponse(
            status_code=exc.legacy_status_code,
            content={"message": exc.message}
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (bad path or query parameters).

    Errors are reported as field/message pairs; the raw validator output
    is not echoed back. In legacy mode the old {"message": ...} body is
    sent with a 200.
    """
    logger.warning(f"Request validation failed on {request.url.path}: {exc.errors()}")

    if settings.LEGACY_ERROR_RESPONSES:
        return JSONResponse(
            status_code=200,
            content={"message": "Validation error"}
        )

    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors
        }
    )
