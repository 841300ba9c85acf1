"""Mapping of domain errors to JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from attraction_dashboard.domain.errors import (
    ConflictError,
    DashboardError,
    Forbidden,
    InvalidCredentials,
    NotFoundError,
    StoreError,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES: dict[type[DashboardError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    Unauthenticated: status.HTTP_401_UNAUTHORIZED,
    Forbidden: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def status_code_for(error: DashboardError) -> int:
    """Return the HTTP status for a domain error; unknown errors are 500."""
    for error_type in type(error).__mro__:
        if error_type in _STATUS_CODES:
            return _STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {"error": message}."""

    @app.exception_handler(DashboardError)
    async def handle_dashboard_error(
        request: Request, exc: DashboardError
    ) -> JSONResponse:
        status_code = status_code_for(exc)
        message = exc.message
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            message = StoreError.default_message
        return JSONResponse(status_code=status_code, content={"error": message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe_validation_error(exc)},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": StoreError.default_message},
        )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or "request"
    return f"Invalid field {field}: {first.get('msg', 'invalid value')}"
