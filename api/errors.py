"""
Translation of application exceptions into HTTP responses.

Every SchedulingError is rendered as ``{"error": ..., "code": ..., ...extra}``
so that clients branch on ``code`` rather than on message text.
"""

import logging
from typing import List, Tuple, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from application.exceptions import (
    BookingError,
    NotBookedError,
    NotFoundError,
    ScheduleConflictError,
    SchedulingError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins, so subclasses come before their bases.
STATUS_BY_EXCEPTION: List[Tuple[Type[SchedulingError], int]] = [
    (NotBookedError, 404),
    (NotFoundError, 404),
    (ValidationError, 400),
    (BookingError, 400),
    (ScheduleConflictError, 400),
]


def status_for(exc: SchedulingError) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status_code
    return 500


def error_response(exc: SchedulingError) -> JSONResponse:
    """Build the JSON response for an application exception."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"Unhandled scheduling failure: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={"error": "Internal server error", "code": exc.code},
        )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def _handle_scheduling_error(request: Request, exc: SchedulingError) -> JSONResponse:
    return error_response(exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the SchedulingError handler on ``app``."""
    app.add_exception_handler(SchedulingError, _handle_scheduling_error)
