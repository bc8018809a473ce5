"""Exception handlers for converting exceptions to HTTP responses.

Application and domain exceptions carry an ``error_code``; their handlers
look the HTTP status up in ERROR_CODE_TO_HTTP_STATUS, so a new exception
only needs a new entry in error_codes.py.

Storage failures and anything unexpected are logged with their traceback
and answered with a generic 500 body that leaks no internals.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from user_management.application.exceptions import ApplicationError
from user_management.domain.exceptions import DomainException
from user_management.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(error_code: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={
            "detail": detail,
            "error_code": error_code,
        },
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle ALL application layer exceptions, e.g. UserAlreadyExistsError -> 409."""
    return _error_response(exc.error_code, exc.message)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    InvalidEntityStateException maps to 400, UserNotFoundError to 404.
    """
    return _error_response(exc.error_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (missing fields, wrong JSON types).

    Returns a list of all validation errors with field locations and messages.
    """
    validation_errors = [
        {
            # Field path, e.g. "body.email"
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle storage failures.

    This includes the unique-email IntegrityError produced when two
    concurrent registrations both pass the service's email check.
    """
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)

    return _error_response("DATABASE_ERROR", "An internal database error occurred")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for any unexpected errors."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)

    return _error_response("INTERNAL_SERVER_ERROR", "An internal server error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler above on the application."""
    app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
