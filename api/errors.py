"""
Classified errors and the application-wide error handler.

Every failure leaving a handler is normalized into a ``ClassifiedError``
(status code, public message, private message).  Only the public message
is written to the response body, as ``{"error": <public message>}``; the
private message is logged server-side.

Usage:
    from api.errors import register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = status.HTTP_500_INTERNAL_SERVER_ERROR
DEFAULT_PUBLIC_MESSAGE = "Something went wrong"


class ClassifiedError(Exception):
    """A failure with a client-safe message and a server-only diagnostic."""

    default_status_code: int = DEFAULT_STATUS_CODE
    default_public_message: str = DEFAULT_PUBLIC_MESSAGE

    def __init__(
        self,
        status_code: Optional[int] = None,
        public_message: Optional[str] = None,
        private_message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code or self.default_status_code
        self.public_message = public_message or self.default_public_message
        self.private_message = private_message or ""
        super().__init__(self.private_message or self.public_message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"public_message={self.public_message!r}, "
            f"private_message={self.private_message!r})"
        )


class ValidationError(ClassifiedError):
    """Malformed or missing input fields."""

    default_status_code = status.HTTP_400_BAD_REQUEST
    default_public_message = "Bad request"


class AuthenticationError(ClassifiedError):
    """Missing, malformed or unverifiable bearer token."""

    default_public_message = "Authentication error"


class CredentialError(ClassifiedError):
    """Unknown user name or wrong password."""

    default_status_code = status.HTTP_400_BAD_REQUEST
    default_public_message = "Invalid username or password"


class NotFoundError(ClassifiedError):
    default_status_code = status.HTTP_404_NOT_FOUND
    default_public_message = "Bad request"


class PersistenceError(ClassifiedError):
    pass


def classify(exc: Exception) -> ClassifiedError:
    """Normalize any exception into a ``ClassifiedError``."""
    if isinstance(exc, ClassifiedError):
        return exc
    if isinstance(exc, (SchemaValidationError, RequestValidationError)):
        return ValidationError(private_message=str(exc))
    return ClassifiedError(private_message=str(exc))


def error_response(error: ClassifiedError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content={"error": error.public_message},
    )


async def general_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler: log the private detail, send the public message.

    Unhandled exceptions are re-raised by the server afterwards, which logs
    their traceback, so only the summary line is logged here.
    """
    error = classify(exc)
    if error.status_code >= 500:
        logger.error(
            "%s %s failed with %d: %s",
            request.method,
            request.url.path,
            error.status_code,
            error.private_message,
        )
    else:
        logger.warning(
            "%s %s rejected with %d: %s",
            request.method,
            request.url.path,
            error.status_code,
            error.private_message,
        )
    return error_response(error)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClassifiedError, general_error_handler)
    app.add_exception_handler(RequestValidationError, general_error_handler)
    app.add_exception_handler(Exception, general_error_handler)
