"""
Exception types and FastAPI exception handlers.

Validation problems are reported with status 400 and a plain-text body
listing every offending field.  Any other uncaught exception becomes a
500 with a generic message; the details only go to the log.
"""

import logging
from typing import List, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class ContactError(Exception):
    """Base class for contact related errors."""


class InvalidArgumentError(ContactError, ValueError):
    """A required argument is missing or out of range."""


class ContactServiceError(ContactError):
    """The persistence layer failed while serving a request."""


class ContactValidationError(ContactError):
    """The request body broke one or more field rules."""

    def __init__(self, violations: List[Tuple[str, str]]):
        self.violations = violations
        super().__init__(
            "; ".join(f"{field}: {message}" for field, message in violations)
        )


async def handle_contact_validation_error(
    request: Request, exc: ContactValidationError
) -> PlainTextResponse:
    message = "Validation failed:"
    for field, detail in exc.violations:
        message += f" Field '{field}': {detail};"
        logger.error("Validation error on field '%s': %s", field, detail)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Report path, query and body parsing failures.

    The location is rendered as a dotted path, e.g. ``path.contact_id``
    or ``query.size``.
    """
    message = "Constraint violations:"
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        detail = error.get("msg", "")
        message += f" {location} {detail};"
        logger.error(
            "Validation error: %s, Invalid value: %r", detail, error.get("input")
        )
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


async def handle_invalid_argument(
    request: Request, exc: InvalidArgumentError
) -> PlainTextResponse:
    logger.warning("Invalid argument: %s", exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Unhandled exception: %s", exc, exc_info=exc)
    return PlainTextResponse(
        UNEXPECTED_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers defined in this module to ``app``."""
    app.add_exception_handler(ContactValidationError, handle_contact_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(InvalidArgumentError, handle_invalid_argument)
    app.add_exception_handler(Exception, handle_unexpected_error)
