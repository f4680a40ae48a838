"""Per-document Basic Authentication for Swagger/OpenAPI descriptors."""

from swagger_auth.api.middleware.doc_auth import SwaggerAuthMiddleware
from swagger_auth.api.registration import add_swagger_auth
from swagger_auth.core.configuration import (
    ChainedConfigurationReader,
    ConfigurationReader,
    EnvironmentConfigurationReader,
    MappingConfigurationReader,
)
from swagger_auth.core.filter import DocAuthFilter, extract_document_name
from swagger_auth.core.models import Forward, Reject, SwaggerAuthOptions

__all__ = [
    "ChainedConfigurationReader",
    "ConfigurationReader",
    "DocAuthFilter",
    "EnvironmentConfigurationReader",
    "Forward",
    "MappingConfigurationReader",
    "Reject",
    "SwaggerAuthMiddleware",
    "SwaggerAuthOptions",
    "add_swagger_auth",
    "extract_document_name",
]
