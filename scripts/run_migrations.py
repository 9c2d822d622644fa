#!/usr/bin/env python3
"""Upgrade the discussion schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to "head".
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from fellowship.config import Settings
from fellowship.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade to the requested revision and log the outcome."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("migrations.upgrade", revision=revision):
            command.upgrade(Config("alembic.ini"), revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so a deploy step fails instead of running on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
