#!/usr/bin/env python3
"""Start the postboard API under uvicorn."""

import sys

import logfire
import uvicorn

from board.config import Settings
from board.util.logging import get_logger, setup_logging
from board.util.observability import configure_logfire

logger = get_logger("board.start_app")


def main() -> int:
    """Configure logging and observability, then serve the app.

    Startup failures are reported to Logfire before being re-raised.
    """
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logger.info(
        "Starting postboard on %s:%s (%s)",
        settings.api.host,
        settings.api.port,
        settings.environment,
    )

    try:
        # The app module builds its container at import time
        uvicorn.run(
            "board.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
