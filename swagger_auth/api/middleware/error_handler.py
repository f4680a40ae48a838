"""
Global error handling for the FastAPI application.

Catches SwaggerAuthError subclasses and unhandled exceptions, converting
them into a consistent JSON envelope. Credential failures never reach these
handlers; ``SwaggerAuthMiddleware`` answers them with a plain-text 401.
"""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swagger_auth.core.exceptions import SwaggerAuthError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application.

    Registers two handlers in priority order:
    1. ``SwaggerAuthError`` — maps domain errors to structured JSON responses.
    2. ``Exception`` — catch-all for unexpected server errors (500).

    Args:
        app: The FastAPI application instance to register handlers on.
    """

    @app.exception_handler(SwaggerAuthError)
    async def swagger_auth_error_handler(_request: Request, exc: SwaggerAuthError) -> JSONResponse:
        """Convert domain-specific errors into a JSON error envelope."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "code": exc.code,
                "timestamp": exc.timestamp,
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler — prevents stack traces from leaking to clients."""
        logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "code": "INTERNAL_ERROR",
                "timestamp": datetime.now(UTC).isoformat(),
            },
        )
