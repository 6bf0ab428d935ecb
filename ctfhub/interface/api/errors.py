"""Global error handlers for the FastAPI application.

Domain errors are mapped to HTTP status codes here and rendered as
``{"errorCode", "errorMessage", "details"}`` with absent keys omitted.
Stack traces and internal error text never reach clients.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ctfhub.domain.error import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    InvalidTokenError,
    NotFoundError,
    ValidationError,
)
from ctfhub.persistence.error import PersistenceError
from ctfhub.util.logging import get_logger

logger = get_logger(__name__)

# Checked in order; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidTokenError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
]


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(
    error_code: str | None = None,
    error_message: str | None = None,
    details: Any = None,
) -> dict[str, Any]:
    """Build the JSON error body, leaving out empty keys."""
    body: dict[str, Any] = {}
    if error_code is not None:
        body["errorCode"] = error_code
    if error_message is not None:
        body["errorMessage"] = error_message
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return body


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("error_internal", "An unexpected error occurred"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register global error handlers on the app.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                "Unmapped domain error | path=%s | type=%s",
                request.url.path,
                type(exc).__name__,
            )
            return _internal_error()

        logger.warning(
            "HTTP %d: %s | path=%s | code=%s",
            status_code,
            exc.message,
            request.url.path,
            exc.error_code,
        )
        return JSONResponse(
            status_code=status_code,
            content=error_body(exc.error_code, exc.message, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed path, query or body parameters."""
        logger.warning("Request validation failed | path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("error_validation", "Invalid request", exc.errors()),
        )

    @app.exception_handler(PydanticValidationError)
    async def value_validation_handler(
        request: Request, exc: PydanticValidationError
    ) -> JSONResponse:
        """Handle values rejected by domain value objects and models."""
        logger.warning("Value validation failed | path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "error_validation",
                "Invalid request",
                exc.errors(include_url=False, include_context=False),
            ),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle Starlette HTTP exceptions (unknown routes, bad methods)."""
        if exc.status_code >= 500:
            logger.error("HTTP %d | path=%s", exc.status_code, request.url.path)
            return _internal_error()
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(error_message=str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.error(
            "Persistence failure | path=%s", request.url.path, exc_info=exc
        )
        return _internal_error()

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all handler for unhandled exceptions."""
        logger.error(
            "Unhandled exception | path=%s | type=%s",
            request.url.path,
            type(exc).__name__,
            exc_info=exc,
        )
        return _internal_error()
