"""
Error types raised by the user store and their HTTP mapping.

Services raise these exceptions instead of ``HTTPException`` so they
stay independent of FastAPI.  ``register_exception_handlers`` installs
handlers that turn them into the JSON error envelope
``{"success": false, "message": ...}``.
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for failures reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = list(errors or [])


class ValidationError(StoreError):
    """Malformed id or missing/invalid fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(StoreError):
    """No record with the given id."""

    status_code = status.HTTP_404_NOT_FOUND


def error_body(message: str, errors: Optional[List[str]] = None) -> dict:
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.errors))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for bodies FastAPI cannot decode as JSON.
    messages = [str(err.get("msg", "Invalid request")) for err in exc.errors()]
    logger.debug("%s %s rejected: %s", request.method, request.url.path, messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request body", messages),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
