"""
Server Entry Point - Main Layer

Runs the FastAPI application under uvicorn with the configured host,
port and reload settings.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

configure_logging()

logger = get_logger(__name__)

APP_IMPORT_PATH = "src.main.app:app"


def main() -> None:
    """Start the HTTP server."""
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        environment=settings.environment.value,
    )

    # log_config=None keeps uvicorn on the structlog handlers configured above
    uvicorn.run(
        APP_IMPORT_PATH,
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
