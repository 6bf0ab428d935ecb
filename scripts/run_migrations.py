#!/usr/bin/env python3
"""Apply the ctfhub schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a7d2e40
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from ctfhub.config import Settings
from ctfhub.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision (default ``head``)."""
    revision = argv[0] if argv else "head"
    settings = Settings()

    configure_logfire(settings)

    try:
        logfire.info(
            "Starting database migrations",
            revision=revision,
            git_sha=settings.git_sha,
        )

        alembic_cfg = Config(str(ALEMBIC_INI))
        command.upgrade(alembic_cfg, revision)

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
        # The app must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
