"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from src.domain.exceptions import (
    DomainException,
    CustomerAlreadyRegisteredException,
    CustomerNotFoundException,
    InternalServiceError,
    InvalidCredentialsException,
    StorageError,
    TransactionNotFoundException,
    UnauthorizedException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, body: dict, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={**body, "request_id": get_request_id()},
        headers=headers,
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses. Anything not
    listed here that derives from DomainException is a 400.
    """

    @app.exception_handler(TransactionNotFoundException)
    @app.exception_handler(CustomerNotFoundException)
    async def not_found_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle missing or foreign resources."""
        return _error_response(404, exc.to_dict())

    @app.exception_handler(CustomerAlreadyRegisteredException)
    async def already_registered_handler(
        request: Request,
        exc: CustomerAlreadyRegisteredException,
    ) -> JSONResponse:
        """Handle duplicate NIK or email."""
        return _error_response(409, exc.to_dict())

    @app.exception_handler(InvalidCredentialsException)
    async def invalid_credentials_handler(
        request: Request,
        exc: InvalidCredentialsException,
    ) -> JSONResponse:
        return _error_response(422, exc.to_dict())

    @app.exception_handler(UnauthorizedException)
    async def unauthorized_handler(
        request: Request,
        exc: UnauthorizedException,
    ) -> JSONResponse:
        """Handle missing, invalid or revoked bearer tokens."""
        return _error_response(401, exc.to_dict(), headers={"WWW-Authenticate": "Bearer"})

    @app.exception_handler(InternalServiceError)
    async def internal_error_handler(
        request: Request,
        exc: InternalServiceError,
    ) -> JSONResponse:
        """Details were logged where the failure happened."""
        return _error_response(500, exc.to_dict())

    @app.exception_handler(StorageError)
    async def storage_error_handler(
        request: Request,
        exc: StorageError,
    ) -> JSONResponse:
        """Handle persistence faults that escaped a service."""
        logger.error(
            "storage_error",
            request_id=get_request_id(),
            error=exc.message,
        )
        return _error_response(500, InternalServiceError().to_dict())

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(
            500, {"error": "INTERNAL_ERROR", "message": "An unexpected error occurred."}
        )
