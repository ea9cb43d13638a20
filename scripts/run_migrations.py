#!/usr/bin/env python3
"""Apply Alembic migrations up to head."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the schema to the given revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=revision):
        try:
            command.upgrade(Config(ALEMBIC_INI), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the container rather than start on a broken schema
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
