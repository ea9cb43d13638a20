"""Console logging for postboard processes.

Structured events and spans go through logfire; this module only sets up the
stdlib handlers that uvicorn, SQLAlchemy and the interface layer write to.
"""

import logging
import sys

from board.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def level_for(settings: Settings) -> int:
    """Pick the root level for an environment.

    Debug mode wins; production only reports warnings and up.
    """
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Install a stdout handler and set levels for board and its libraries.

    Args:
        settings: Application settings
    """
    level = level_for(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("board").setLevel(level)

    get_logger(__name__).info(
        "Logging ready (environment=%s, level=%s)",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``board`` hierarchy (pass ``__name__``)."""
    return logging.getLogger(name)
