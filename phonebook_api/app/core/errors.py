"""
Domain errors and their HTTP translation.

Services raise ``PhonebookError`` subclasses; the handlers registered
by ``register_exception_handlers`` turn them into JSON responses of the
form ``{"error": "<message>"}``.  Requests that match no route (or a
known path with an unsupported method) are answered with a 404
``unknown endpoint`` error, and create payloads that cannot be read as
a name/number pair are reported as missing fields.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "unknown endpoint"
NAME_OR_NUMBER_MISSING = "Name or number missing"
NAME_MUST_BE_UNIQUE = "Name must be unique"
ENTRY_NOT_FOUND = "Entry not found"


class PhonebookError(Exception):
    """Base class for errors that map onto an HTTP error response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(PhonebookError):
    """The client sent a payload the phonebook cannot accept."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PhonebookError):
    """The requested entry does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class IdSpaceExhaustedError(PhonebookError):
    """No free id could be drawn within the configured number of attempts."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def phonebook_error_handler(request: Request, exc: PhonebookError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # The router signals both unknown paths (404) and known paths with a
    # foreign method (405); both are an unknown endpoint to clients.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, UNKNOWN_ENDPOINT)
    return error_response(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s rejected: unreadable payload", request.method, request.url.path)
    return error_response(status.HTTP_400_BAD_REQUEST, NAME_OR_NUMBER_MISSING)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the phonebook error handlers to ``app``."""
    app.add_exception_handler(PhonebookError, phonebook_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
