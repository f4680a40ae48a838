"""
Pydantic v2 models shared by the filter and the API layer.

Options and credential pairs are frozen: a filter is built once at startup
and then read concurrently by every request.
"""

from datetime import datetime
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIGURATION_SECTION = "Swagger:Auth"

# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    """GET /health response."""

    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class SwaggerAuthOptions(BaseModel):
    """Construction-time options for the documentation auth filter.

    Attributes:
        configuration_section: Root key under which per-document credentials
            live, e.g. ``Swagger:Auth`` for ``Swagger:Auth:v1-admin:Username``.
        require_auth_for_all_documents: Carried for configuration parity.
            The authorization decision does not consult it; protection is
            opt-in per document.
        custom_error_message: Body returned on rejection instead of the
            default message. ``{document}`` is replaced with the document name.
    """

    model_config = ConfigDict(frozen=True)

    configuration_section: str = DEFAULT_CONFIGURATION_SECTION
    require_auth_for_all_documents: bool = False
    custom_error_message: str | None = None

    @field_validator("configuration_section")
    @classmethod
    def _strip_section(cls, value: str) -> str:
        value = value.strip().strip(":")
        if not value:
            raise ValueError("configuration_section must not be empty")
        return value

    @field_validator("custom_error_message")
    @classmethod
    def _blank_message_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


class DocumentCredentials(BaseModel):
    """Username/password pair configured for one documentation set."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)


class BasicCredentials(BaseModel):
    """Username/password pair decoded from an ``Authorization: Basic`` header."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)


# ---------------------------------------------------------------------------
# Decisions
# ---------------------------------------------------------------------------


class Forward(BaseModel):
    """Let the request continue to the next handler untouched."""

    model_config = ConfigDict(frozen=True)

    document_name: str | None = None


class Reject(BaseModel):
    """Short-circuit the request with a 401 challenge."""

    model_config = ConfigDict(frozen=True)

    document_name: str
    message: str
    reason: str = "credentials"

    @property
    def realm(self) -> str:
        return f"{self.document_name} API Documentation"

    @property
    def www_authenticate(self) -> str:
        """Challenge header value; the realm is reduced to printable ASCII."""
        return f'Basic realm="{header_safe(self.realm)}"'


def header_safe(value: str) -> str:
    """Escape ``value`` for use inside a quoted header parameter.

    Quotes and backslashes are backslash-escaped; characters outside printable
    ASCII are percent-encoded as UTF-8.
    """
    parts = []
    for char in value:
        if char in '"\\':
            parts.append("\\" + char)
        elif " " <= char <= "~":
            parts.append(char)
        else:
            parts.append(quote(char.encode("utf-8", "surrogatepass"), safe=""))
    return "".join(parts)


AuthDecision = Forward | Reject
