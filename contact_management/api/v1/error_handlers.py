"""
Exception Handlers
==================

The only place where domain errors become HTTP status codes.
Server-side detail is logged; callers get sanitized bodies.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from contact_management.domain.exceptions import (
    AuthenticationError,
    NotFoundError,
    StoreError,
    UnexpectedError,
    ValidationError,
    ValidationFailure,
)


def register_exception_handlers(application: FastAPI, logger: logging.Logger) -> None:
    """Attach handlers for every error category to the application."""

    @application.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        logger.info(f"Validation failed for {request.method} {request.url.path}: {len(exc.failures)} failure(s)")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_dict())

    @application.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies and parameters share the 400 contract of entity validation
        failures = [
            ValidationFailure(str(error["loc"][-1]) if error["loc"] else "request", error["msg"])
            for error in exc.errors()
        ]
        logger.info(f"Rejected malformed {request.method} {request.url.path}: {len(failures)} failure(s)")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=ValidationError(failures).to_dict())

    @application.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=exc.to_dict(),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @application.exception_handler(NotFoundError)
    async def handle_not_found_error(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=exc.to_dict())

    @application.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
        logger.error(
            f"Store error on {request.method} {request.url.path}: {exc.original_exception!r}"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "A database error occurred.", "code": exc.code},
        )

    @application.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UnexpectedError().to_dict(),
        )
