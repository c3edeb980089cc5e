"""
Error types and the handlers that render them.

Every error leaves the API as ``{"error": "<message>"}`` with the status code
carried by the exception. FastAPI's own ``HTTPException`` and request
validation errors are rewritten into the same shape so clients only ever
have to look at one key.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class CoachingAppException(Exception):
    """Base exception for the coaching API."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class NotFoundError(CoachingAppException):
    """Raised when an id or association endpoint references a missing row."""

    status_code = 404


class InvalidRequestError(CoachingAppException):
    """Raised for bodies that decode but carry a disallowed value."""

    status_code = 400


class ConflictError(CoachingAppException):
    """Raised when a unique constraint (team name, member email) is violated."""

    status_code = 500


class StoreError(CoachingAppException):
    """Raised when the database rejects an operation for any other reason."""

    status_code = 500


class AssociationClearError(StoreError):
    """Raised when a team's member associations could not be removed."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to clear team members association: {reason}")


def _format_validation_errors(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        msg = error.get("msg", "Invalid value").removeprefix("Value error, ")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(messages) or "Invalid request body"


async def coaching_exception_handler(request: Request, exc: CoachingAppException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Undecodable bodies and rejected field values are client errors, reported as 400 rather than 422
    return JSONResponse(status_code=400, content={"error": _format_validation_errors(exc)})


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Unhandled database error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CoachingAppException, coaching_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
