"""Mapping from domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from board.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from board.util.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_ERROR: dict[type[DomainError], tuple[int, str]] = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "validation_error"),
    AuthenticationError: (status.HTTP_401_UNAUTHORIZED, "authentication_error"),
    NotAuthorizedError: (status.HTTP_403_FORBIDDEN, "authorization_error"),
    NotFoundError: (status.HTTP_404_NOT_FOUND, "not_found"),
    ConflictError: (status.HTTP_409_CONFLICT, "conflict"),
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
INVALID_REQUEST = "Invalid request"


def status_for(error: DomainError) -> tuple[int, str]:
    """Status code and error kind for a domain error.

    Kinds without a client-facing meaning (e.g. data integrity faults) map
    to 500.
    """
    for error_type in type(error).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "server_error"


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Domain errors carry a short message that is safe to show. Malformed
    requests that FastAPI rejects before a route runs are reported as
    validation errors. Anything else is logged server-side and reported with
    a generic message.
    """

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError):
        status_code, kind = status_for(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Unhandled domain error on %s: %s", request.url.path, exc.message)
            logfire.error(
                "Unhandled domain error", path=request.url.path, error=exc.message
            )
            message = GENERIC_ERROR_MESSAGE
        else:
            logfire.info(
                "Request rejected",
                path=request.url.path,
                status_code=status_code,
                error=kind,
            )
            message = exc.message

        return JSONResponse(
            status_code=status_code,
            content={"error": kind, "detail": message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        detail = errors[0].get("msg", INVALID_REQUEST) if errors else INVALID_REQUEST
        logfire.info(
            "Request rejected",
            path=request.url.path,
            status_code=status.HTTP_400_BAD_REQUEST,
            error="validation_error",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "validation_error", "detail": detail},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "Unexpected error on %s: %s", request.url.path, str(exc), exc_info=True
        )
        logfire.error(
            "Unexpected error",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "server_error", "detail": GENERIC_ERROR_MESSAGE},
        )
