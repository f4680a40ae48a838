"""
HTTP Basic ``Authorization`` header parsing.

``parse_basic_authorization`` returns a result object instead of raising:
every malformed header (wrong scheme, bad base64, bad UTF-8, no colon) is an
ordinary ``CredentialsRejected`` value the caller turns into a 401.
"""

import base64
import binascii
import secrets
from dataclasses import dataclass

from swagger_auth.core.models import BasicCredentials, DocumentCredentials

BASIC_PREFIX = "Basic "


@dataclass(frozen=True, slots=True)
class CredentialsParsed:
    """Header decoded into a username/password pair."""

    credentials: BasicCredentials


@dataclass(frozen=True, slots=True)
class CredentialsRejected:
    """Header unusable. ``reason`` is one of missing/scheme/encoding/format."""

    reason: str


ParseResult = CredentialsParsed | CredentialsRejected


def parse_basic_authorization(header: str | None) -> ParseResult:
    """Decode an ``Authorization: Basic <base64(user:pass)>`` header value.

    The scheme prefix is matched case-sensitively. The password may itself
    contain colons; only the first colon separates the two fields.

    Args:
        header: Raw header value, or ``None`` when the header is absent.

    Returns:
        ``CredentialsParsed`` on success, ``CredentialsRejected`` otherwise.
    """
    if not header:
        return CredentialsRejected("missing")
    if not header.startswith(BASIC_PREFIX):
        return CredentialsRejected("scheme")

    # Whitespace inside the token is skipped
    encoded = "".join(header[len(BASIC_PREFIX) :].split())
    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return CredentialsRejected("encoding")

    username, sep, password = decoded.partition(":")
    if not sep:
        return CredentialsRejected("format")

    return CredentialsParsed(BasicCredentials(username=username, password=password))


def _to_bytes(value: str) -> bytes:
    # Environment values may carry surrogate-escaped bytes
    return value.encode("utf-8", "surrogateescape")


def credentials_match(supplied: BasicCredentials, expected: DocumentCredentials) -> bool:
    """Exact, case-sensitive comparison of both fields."""
    user_ok = secrets.compare_digest(_to_bytes(supplied.username), _to_bytes(expected.username))
    pass_ok = secrets.compare_digest(_to_bytes(supplied.password), _to_bytes(expected.password))
    return user_ok and pass_ok
