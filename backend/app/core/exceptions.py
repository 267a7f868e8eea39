"""
Service error taxonomy.

Store failures are caught once at the service boundary and reclassified
into these kinds; ``register_exception_handlers`` renders them as
``{"detail": ...}`` responses.
"""
import logging
from typing import NoReturn

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ConflictError(ServiceError):
    """Uniqueness violation (duplicate title, slug or email)."""
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN


class BadRequestError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class InternalError(ServiceError):
    """Anything unexpected — full detail goes to the log only."""

    def __init__(self, detail: str = "Unexpected error, check server logs"):
        super().__init__(detail)


def is_unique_violation(error: Exception) -> bool:
    """True if a DB error is a uniqueness violation (PostgreSQL or SQLite)."""
    if not isinstance(error, IntegrityError):
        return False
    orig = error.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()


def db_error_detail(error: Exception) -> str:
    """Best human-readable detail from a driver error (asyncpg keeps it on the cause)."""
    orig = getattr(error, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        detail = getattr(candidate, "detail", None)
        if detail:
            return detail
    return str(orig if orig is not None else error)


def handle_db_exceptions(error: Exception, logger: logging.Logger) -> NoReturn:
    """Reclassify a persistence failure into Conflict or Internal and raise it."""
    if is_unique_violation(error):
        raise ConflictError(db_error_detail(error)) from error
    logger.error("Unexpected database error: %s", error, exc_info=error)
    raise InternalError() from error


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ServiceError handler to the application."""
    app.add_exception_handler(ServiceError, _service_error_handler)
