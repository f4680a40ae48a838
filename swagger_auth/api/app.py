"""
FastAPI application factory.

``create_app()`` assembles a host application that serves one OpenAPI
descriptor per documentation set under ``/swagger/<name>/swagger.json`` and
guards them with ``SwaggerAuthMiddleware``. The module-level ``app`` instance
allows ``uvicorn swagger_auth.api.app:app --reload``.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.openapi.utils import get_openapi

from swagger_auth.api.middleware.error_handler import register_error_handlers
from swagger_auth.api.registration import (
    add_swagger_auth,
    configuration_from_settings,
    options_from_settings,
)
from swagger_auth.core.config import Settings, get_settings
from swagger_auth.core.configuration import ConfigurationReader
from swagger_auth.core.exceptions import DocumentNotFoundError
from swagger_auth.core.models import HealthResponse

# Documentation sets served by the demo host: name -> route tag
DOCUMENT_TAGS = {
    "v1-public": "public",
    "v1-admin": "admin",
}


public_router = APIRouter(prefix="/api/v1/public", tags=["public"])
admin_router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@public_router.get("/status")
async def public_status() -> dict[str, str]:
    return {"status": "ok"}


@admin_router.get("/users")
async def admin_users() -> list[dict[str, Any]]:
    return [{"id": 1, "name": "admin"}]


def build_document(app: FastAPI, document_name: str) -> dict[str, Any]:
    """OpenAPI schema restricted to the routes tagged for ``document_name``."""
    tag = DOCUMENT_TAGS.get(document_name)
    if tag is None:
        raise DocumentNotFoundError(document_name)
    routes = [r for r in app.routes if tag in (getattr(r, "tags", None) or [])]
    return get_openapi(
        title=f"{app.title} ({document_name})",
        version=app.version,
        routes=routes,
    )


def create_app(
    settings: Settings | None = None,
    configuration: ConfigurationReader | None = None,
) -> FastAPI:
    """Build and return a fully configured FastAPI application.

    Args:
        settings: Overrides ``get_settings()``.
        configuration: Credential source; built from settings when omitted.
    """
    settings = settings or get_settings()
    logging.getLogger("swagger_auth").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="SwaggerAuth",
        description="Per-document Basic Authentication for Swagger descriptors.",
        version="0.1.0",
        openapi_url=None,
    )

    # -- Documentation auth --
    if configuration is None:
        configuration = configuration_from_settings(settings)
    add_swagger_auth(app, configuration, options_from_settings(settings))

    # -- Error handlers --
    register_error_handlers(app)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=datetime.now(UTC))

    # -- Documentation descriptors --
    @app.get("/swagger/{document_name}/swagger.json", include_in_schema=False)
    async def swagger_document(document_name: str) -> dict[str, Any]:
        return build_document(app, document_name.lower())

    app.include_router(public_router)
    app.include_router(admin_router)

    return app


app = create_app()
