"""Run the demo host: ``python -m swagger_auth``."""

import uvicorn

from swagger_auth.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "swagger_auth.api.app:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
