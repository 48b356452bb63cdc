"""Run the Hash Links server."""

import logging
import sys

import uvicorn

from .core.config import settings
from .main import app

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the application on the configured host and port."""
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    logger.info(f"Server is running on port {settings.port}")
    try:
        server.run()
    except (OSError, SystemExit) as e:
        # uvicorn logs bind failures itself and exits before startup completes
        if server.started:
            raise
        logger.error(f"Error on starting the server: {e!r}")
        sys.exit(1)

    if not server.started:
        logger.error("Error on starting the server: listener never started")
        sys.exit(1)


if __name__ == "__main__":
    main()
