#!/usr/bin/env python3
"""Apply Alembic migrations for the Dev Connector schema.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py -1         # downgrade one step
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from connector.config import Settings
from connector.util.logging import setup_logging
from connector.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the database, reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[0] if argv else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target):
        try:
            if not target.startswith("-"):
                command.upgrade(alembic_cfg, target)
            else:
                command.downgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so a deploy never starts against a half-migrated schema
            raise

        logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
