"""Unit tests for SwaggerAuthMiddleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from swagger_auth.api.middleware.doc_auth import SwaggerAuthMiddleware
from swagger_auth.core.configuration import MappingConfigurationReader
from swagger_auth.core.models import SwaggerAuthOptions


def _create_test_app(configuration, options=None) -> FastAPI:
    """Create a minimal FastAPI app with SwaggerAuthMiddleware."""
    app = FastAPI(openapi_url=None)
    app.add_middleware(SwaggerAuthMiddleware, configuration=configuration, options=options)
    app.state.downstream_calls = 0

    @app.get("/health")
    async def health():
        app.state.downstream_calls += 1
        return {"status": "ok"}

    @app.get("/swagger/{name}/swagger.json")
    async def descriptor(name: str):
        app.state.downstream_calls += 1
        return {"openapi": "3.1.0", "info": {"title": name}}

    @app.get("/swagger//swagger.json")
    async def unnamed_descriptor():
        app.state.downstream_calls += 1
        return {"openapi": "3.1.0", "info": {"title": ""}}

    return app


class TestSwaggerAuthMiddlewarePassThrough:
    """Non-descriptor paths and unconfigured documents reach the handler."""

    @pytest.fixture
    def app(self, configuration):
        return _create_test_app(configuration)

    @pytest.fixture
    def client(self, app):
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    async def test_non_doc_path_untouched(self, app, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert "www-authenticate" not in resp.headers
        assert app.state.downstream_calls == 1

    async def test_unconfigured_document_without_header(self, client):
        resp = await client.get("/swagger/v1-public/swagger.json")
        assert resp.status_code == 200
        assert resp.json()["info"]["title"] == "v1-public"

    async def test_unconfigured_document_with_garbage_header(self, client):
        resp = await client.get(
            "/swagger/v1-public/swagger.json",
            headers={"Authorization": "Basic not-valid-base64!!"},
        )
        assert resp.status_code == 200

    async def test_empty_document_name_passes(self, app, client):
        resp = await client.get("/swagger//swagger.json")
        assert resp.status_code == 200
        assert "www-authenticate" not in resp.headers
        assert app.state.downstream_calls == 1


class TestSwaggerAuthMiddlewareProtected:
    """Configured documents require matching Basic credentials."""

    @pytest.fixture
    def app(self, configuration):
        return _create_test_app(configuration)

    @pytest.fixture
    def client(self, app):
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    async def test_valid_credentials_pass(self, app, client):
        resp = await client.get(
            "/swagger/v1-admin/swagger.json",
            headers={"Authorization": "Basic YWRtaW46c2VjcmV0"},
        )
        assert resp.status_code == 200
        assert "www-authenticate" not in resp.headers
        assert app.state.downstream_calls == 1

    async def test_wrong_password_returns_401(self, app, client):
        resp = await client.get(
            "/swagger/v1-admin/swagger.json",
            headers={"Authorization": "Basic YWRtaW46d3Jvbmc="},
        )
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == 'Basic realm="v1-admin API Documentation"'
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == (
            "Unauthorized access to v1-admin API documentation. "
            "Please provide valid credentials."
        )
        assert app.state.downstream_calls == 0

    async def test_missing_header_returns_401(self, client):
        resp = await client.get("/swagger/v1-admin/swagger.json")
        assert resp.status_code == 401

    async def test_bearer_scheme_returns_401(self, client):
        resp = await client.get(
            "/swagger/v1-admin/swagger.json",
            headers={"Authorization": "Bearer xyz"},
        )
        assert resp.status_code == 401

    async def test_malformed_base64_returns_401_not_500(self, client):
        resp = await client.get(
            "/swagger/v1-admin/swagger.json",
            headers={"Authorization": "Basic not-valid-base64!!"},
        )
        assert resp.status_code == 401

    async def test_uppercase_path_is_protected(self, client):
        resp = await client.get("/SWAGGER/v1-admin/swagger.json")
        assert resp.status_code == 401
        assert resp.headers["www-authenticate"] == 'Basic realm="v1-admin API Documentation"'

    async def test_httpx_basic_auth(self, client):
        resp = await client.get("/swagger/v1-partner/swagger.json", auth=("partner", "p:a:ss"))
        assert resp.status_code == 200


async def test_custom_error_message(configuration):
    app = _create_test_app(
        configuration, SwaggerAuthOptions(custom_error_message="No docs for you ({document}).")
    )
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/swagger/v1-admin/swagger.json")
    assert resp.status_code == 401
    assert resp.text == "No docs for you (v1-admin)."


async def test_non_ascii_document_name_gets_401_challenge():
    reader = MappingConfigurationReader(
        {"Swagger": {"Auth": {"文档": {"Username": "admin", "Password": "secret"}}}}
    )
    app = _create_test_app(reader)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        denied = await client.get("/swagger/文档/swagger.json")
        allowed = await client.get("/swagger/文档/swagger.json", auth=("admin", "secret"))

    assert denied.status_code == 401
    assert denied.headers["www-authenticate"] == (
        'Basic realm="%E6%96%87%E6%A1%A3 API Documentation"'
    )
    assert denied.text == (
        "Unauthorized access to 文档 API documentation. Please provide valid credentials."
    )
    assert allowed.status_code == 200
    assert app.state.downstream_calls == 1
