"""
Palette API - Main Entry Point

Color palette service for visualizing progressive delivery.
"""

import structlog
import uvicorn

from palette_api.config import get_settings
from palette_api.core.logging import configure_logging

logger = structlog.get_logger(__name__)


def main():
    """Main entry point for running the application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info(
        "Starting server",
        host=settings.api_host,
        port=settings.port,
        version=settings.app_version,
        environment=settings.app_env,
    )

    # uvicorn drains in-flight requests on SIGTERM/SIGINT and cancels
    # whatever is left once the grace period expires
    uvicorn.run(
        "palette_api.api.main:app",
        host=settings.api_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )


if __name__ == "__main__":
    main()
