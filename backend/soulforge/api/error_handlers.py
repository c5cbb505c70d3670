"""Error Handlers — global exception handlers for the Soulforge API.

Invariants:
    - SoulforgeError → structured JSON with error code, message, severity
    - Rejections log caller, operation, and token_id; CRITICAL severity logs at ERROR
    - RequestValidationError → field-level error details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SoulforgeError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from soulforge.core.errors import ErrorSeverity, SoulforgeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_soulforge_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_soulforge_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(SoulforgeError)
    async def soulforge_error_handler(request: Request, exc: SoulforgeError):
        """Handle all Soulforge domain/infrastructure errors."""
        log = logger.error if exc.severity == ErrorSeverity.CRITICAL else logger.info
        log(
            f"{exc.code} on {exc.context.operation or request.url.path}: {exc.message}",
            extra=_error_log_extra(exc, request),
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _error_log_extra(exc: SoulforgeError, request: Request) -> dict:
    """Log fields for a rejected call: who, which operation, which token."""
    return {
        "error_code": exc.code,
        "path": request.url.path,
        "caller": exc.context.caller or request.headers.get("x-caller-address"),
        "operation": exc.context.operation,
        "token_id": exc.context.token_id,
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
