"""
SwaggerAuth exception hierarchy.

Request-time credential problems never raise; they become 401 decisions.
These exceptions cover setup mistakes (bad credential files, empty
configuration sections) and are rendered by the API error handlers.
"""

from datetime import UTC, datetime


class SwaggerAuthError(Exception):
    """Base exception for all SwaggerAuth errors."""

    def __init__(
        self,
        detail: str = "An unexpected error occurred",
        code: str = "SWAGGER_AUTH_ERROR",
        status_code: int = 500,
    ) -> None:
        self.detail = detail
        self.code = code
        self.status_code = status_code
        self.timestamp = datetime.now(UTC).isoformat()
        super().__init__(detail)


class SwaggerAuthConfigError(SwaggerAuthError):
    """Raised when documentation credentials cannot be loaded or are malformed."""

    def __init__(self, detail: str = "Invalid SwaggerAuth configuration") -> None:
        super().__init__(
            detail=detail,
            code="SWAGGER_AUTH_CONFIG_ERROR",
            status_code=500,
        )


class DocumentNotFoundError(SwaggerAuthError):
    """Raised when a documentation descriptor name is unknown to the host app."""

    def __init__(self, document_name: str) -> None:
        super().__init__(
            detail=f"Documentation not found: {document_name}",
            code="DOCUMENT_NOT_FOUND",
            status_code=404,
        )
