"""Shared pytest fixtures for the SwaggerAuth test suite.

Provides an in-memory credential store, filter options, and a small
request-building helper for Basic ``Authorization`` headers.
"""

import base64

import pytest

from swagger_auth.core.configuration import MappingConfigurationReader
from swagger_auth.core.models import SwaggerAuthOptions

# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------


def basic_header(username: str, password: str) -> str:
    """Build an ``Authorization`` header value for ``username:password``."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


@pytest.fixture
def credentials_data():
    """Nested configuration shaped like an appsettings.json file.

    Returns:
        dict: ``v1-admin`` protected by admin/secret, ``v1-partner`` by
        partner/p:a:ss, and ``v1-half`` with only a username (unprotected).
    """
    return {
        "Swagger": {
            "Auth": {
                "v1-admin": {"Username": "admin", "Password": "secret"},
                "v1-partner": {"Username": "partner", "Password": "p:a:ss"},
                "v1-half": {"Username": "half", "Password": ""},
            }
        }
    }


@pytest.fixture
def configuration(credentials_data):
    """Live mapping-backed reader over ``credentials_data``."""
    return MappingConfigurationReader(credentials_data)


@pytest.fixture
def options():
    """Default filter options (``Swagger:Auth`` section)."""
    return SwaggerAuthOptions()


@pytest.fixture
def make_basic_header():
    """Return the ``basic_header`` builder for use inside tests."""
    return basic_header
