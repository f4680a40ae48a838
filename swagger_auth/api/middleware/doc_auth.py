"""
Swagger documentation authentication middleware.

Guards ``/swagger/<doc>/swagger.json`` descriptors with per-document HTTP
Basic credentials. Documents without configured credentials, and every
non-descriptor path, pass through untouched.
"""

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from swagger_auth.core.configuration import ConfigurationReader
from swagger_auth.core.filter import DocAuthFilter
from swagger_auth.core.models import Reject, SwaggerAuthOptions


class SwaggerAuthMiddleware(BaseHTTPMiddleware):
    """Answer 401 for descriptor requests lacking the document's credentials."""

    def __init__(
        self,
        app: ASGIApp,
        configuration: ConfigurationReader,
        options: SwaggerAuthOptions | None = None,
    ) -> None:
        super().__init__(app)
        self.filter = DocAuthFilter(configuration, options)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        decision = self.filter.evaluate(
            request.url.path, request.headers.get("authorization")
        )
        if isinstance(decision, Reject):
            return PlainTextResponse(
                decision.message,
                status_code=401,
                headers={"WWW-Authenticate": decision.www_authenticate},
            )
        return await call_next(request)
