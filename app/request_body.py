# =============================================================================
# app/request_body.py - Request Body Parsing
# =============================================================================
# POST routes accept both JSON and urlencoded/multipart form bodies, as
# posted by the landing page forms. Parsing happens inside each route so a
# bad body is reported with that route's failure message.
#
# Usage:
#   body = await parse_body(request, UserCreate)
# =============================================================================

import json
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.exceptions import InvalidBodyError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict[str, Any]:
    """
    Read a request body into a dict.

    Form bodies use request.form(); anything else is decoded as JSON.
    An empty body reads as {}.

    Raises:
        InvalidBodyError: If the body isn't a JSON object
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidBodyError("malformed JSON") from e

    if not isinstance(data, dict):
        raise InvalidBodyError("expected a JSON object")
    return data


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Read the request body and validate it against a model.

    Raises:
        InvalidBodyError: If the body can't be read or a field has the wrong type
    """
    data = await read_body(request)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise InvalidBodyError("badly typed fields", errors=errors) from e
