"""
Application configuration via pydantic-settings.

Loads values from .env file with sensible defaults for local development.
Use ``get_settings()`` to obtain the cached singleton instance.

Per-document credentials are *not* settings fields: they are read on every
request through a ``ConfigurationReader`` (see ``swagger_auth.core.configuration``).
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from swagger_auth.core.models import DEFAULT_CONFIGURATION_SECTION


class Settings(BaseSettings):
    """SwaggerAuth host settings loaded from environment / .env file.

    Attributes:
        swagger_auth_section: Configuration namespace holding per-document
            credentials.
        swagger_auth_config_file: Optional JSON file with nested credentials,
            layered underneath environment variables.
        swagger_custom_error_message: Rejection body; empty uses the default.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Credentials use Swagger__Auth__* names, not fields
    )

    # --- Documentation auth ---
    swagger_auth_section: str = DEFAULT_CONFIGURATION_SECTION
    swagger_require_auth_for_all_documents: bool = False  # Carried, not enforced
    swagger_custom_error_message: str = ""
    swagger_auth_config_file: str = ""  # e.g. "config/swagger_auth.json"
    swagger_auth_env_prefix: str = ""  # Prefix in front of Swagger__Auth__... variables

    # --- Application ---
    app_host: str = "0.0.0.0"  # Bind address for the demo server
    app_port: int = 8000
    log_level: str = "INFO"  # Python logging level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings singleton.

    Uses ``functools.lru_cache`` so the .env file is read only once.
    Subsequent calls return the same ``Settings`` instance.

    Returns:
        Settings: The application-wide configuration object.
    """
    return Settings()
