# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Handles user creation, listing and the administrative bulk delete.
# Every failure is reported with the route's generic message.
# =============================================================================

import logging

from fastapi import APIRouter, Request

from app.exceptions import route_failure
from app.request_body import parse_body
from core.models.user import UserCreate
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

DELETE_USERS_FAILED = "Deleting all users failed!"
LIST_USERS_FAILED = "Getting all users failed!"
CREATE_USER_FAILED = "User creation failed!"


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/delete")
async def delete_all_users():
    """
    Delete all users.

    Administrative endpoint. Exercises are not deleted.
    """
    logger.info("### DELETE ALL USERS ###")

    try:
        return UserService.delete_all_users()
    except Exception as e:
        raise route_failure(DELETE_USERS_FAILED, e) from e


@router.get("")
async def list_users():
    """
    List all users.

    Returns a list of {username, id}, or {message} when there are no users.
    """
    logger.info("### GET ALL USERS ###")

    try:
        return UserService.list_users()
    except Exception as e:
        raise route_failure(LIST_USERS_FAILED, e) from e


@router.post(
    "",
    openapi_extra={"requestBody": {"content": {
        "application/json": {"schema": UserCreate.model_json_schema()},
        "application/x-www-form-urlencoded": {"schema": UserCreate.model_json_schema()},
    }}},
)
async def create_user(request: Request):
    """
    Create a new user.

    Accepts a JSON or form body with `username`. Usernames are not unique;
    each call creates a distinct user.
    """
    logger.info("### CREATE A NEW USER ###")

    try:
        body = await parse_body(request, UserCreate)
        logger.info(f"CREATING A NEW USER WITH USERNAME - {body.username}")
        return UserService.create_user(body.username)
    except Exception as e:
        raise route_failure(CREATE_USER_FAILED, e) from e
