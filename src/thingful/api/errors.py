"""
Exception handlers.

Every failure leaves the API as `{"error": message}` with the matching status:
- ThingfulError subclasses carry their own status and message
- request validation failures become 400 with a field-specific message
- anything else is logged and becomes 500
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from ..exceptions import ThingfulError
from ..models.entities import MAX_RATING, MIN_RATING


def validation_message(errors: list[dict]) -> str:
    """
    Turn the first pydantic error into a client-facing message.

    Body fields are reported in model field order, so a missing thing_id is
    reported before a missing rating.
    """
    if not errors:
        return "Invalid request"

    error = errors[0]
    location = tuple(error.get("loc", ()))
    source = location[0] if location else None
    field = str(location[1]) if len(location) > 1 else None

    if source == "body":
        if field is None:
            # No body at all (or not a JSON object)
            return "Missing 'thing_id' in request body"
        if error.get("type") == "missing":
            return f"Missing '{field}' in request body"
        if field == "rating":
            return f"Rating must be an integer between {MIN_RATING} and {MAX_RATING}"
        return f"Invalid '{field}' in request body"

    if field:
        return f"Invalid '{field}'"
    return "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to an app."""

    @app.exception_handler(ThingfulError)
    async def thingful_error_handler(request: Request, exc: ThingfulError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = validation_message(list(exc.errors()))
        logger.debug(f"Validation failed for {request.method} {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(
            f"Unhandled error on {request.method} {request.url.path}"
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
