"""
Helpers for installing ``SwaggerAuthMiddleware`` into an application.

``add_swagger_auth()`` is the one-call setup; ``options_from_settings()`` and
``configuration_from_settings()`` build its arguments from ``Settings``.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from starlette.applications import Starlette

from swagger_auth.api.middleware.doc_auth import SwaggerAuthMiddleware
from swagger_auth.core.config import Settings
from swagger_auth.core.configuration import (
    ChainedConfigurationReader,
    ConfigurationReader,
    EnvironmentConfigurationReader,
    MappingConfigurationReader,
)
from swagger_auth.core.exceptions import SwaggerAuthConfigError
from swagger_auth.core.models import SwaggerAuthOptions

logger = logging.getLogger(__name__)

AppT = TypeVar("AppT", bound=Starlette)


def options_from_settings(settings: Settings) -> SwaggerAuthOptions:
    """Translate ``swagger_*`` settings into filter options.

    Raises:
        SwaggerAuthConfigError: If ``swagger_auth_section`` is blank.
    """
    try:
        return SwaggerAuthOptions(
            configuration_section=settings.swagger_auth_section,
            require_auth_for_all_documents=settings.swagger_require_auth_for_all_documents,
            custom_error_message=settings.swagger_custom_error_message or None,
        )
    except ValueError as exc:
        raise SwaggerAuthConfigError(f"Invalid documentation auth settings: {exc}") from exc


def configuration_from_settings(settings: Settings) -> ConfigurationReader:
    """Environment variables, layered over the JSON credentials file if one is set."""
    environment = EnvironmentConfigurationReader(prefix=settings.swagger_auth_env_prefix)
    if not settings.swagger_auth_config_file:
        return environment
    file_reader = MappingConfigurationReader.from_json_file(settings.swagger_auth_config_file)
    return ChainedConfigurationReader(file_reader, environment)


def add_swagger_auth(
    app: AppT,
    configuration: ConfigurationReader | None = None,
    options: SwaggerAuthOptions | None = None,
    configure: Callable[[SwaggerAuthOptions], SwaggerAuthOptions] | None = None,
) -> AppT:
    """Install the documentation auth middleware on ``app``.

    Args:
        app: FastAPI or Starlette application.
        configuration: Credential source; defaults to the process environment.
        options: Filter options; defaults to ``SwaggerAuthOptions()``.
        configure: Optional hook receiving the options and returning the
            options to use, e.g. ``lambda o: o.model_copy(update={...})``.

    Returns:
        The same application, for chaining.
    """
    options = options or SwaggerAuthOptions()
    if configure is not None:
        options = configure(options)
    if configuration is None:
        configuration = EnvironmentConfigurationReader()

    app.add_middleware(SwaggerAuthMiddleware, configuration=configuration, options=options)
    logger.info(
        "Swagger documentation auth enabled (section=%s)", options.configuration_section
    )
    return app
