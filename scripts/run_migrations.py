#!/usr/bin/env python3
"""Apply the Hivemind schema migrations, reporting failures to Logfire.

Usage:
    run_migrations.py            # upgrade to head
    run_migrations.py <revision> # downgrade to an older revision or "base"
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from hivemind.config import Settings
from hivemind.util.logging import setup_logging
from hivemind.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the database to the requested revision."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    target = argv[0] if argv else "head"

    try:
        head = ScriptDirectory.from_config(alembic_cfg).get_current_head()
        logfire.info(
            "Starting database migrations",
            environment=settings.environment,
            target=target,
            head=head,
        )

        if target in ("head", head):
            command.upgrade(alembic_cfg, "head")
        else:
            # Any other target is an older revision (or "base")
            command.downgrade(alembic_cfg, target)

        logfire.info("Database migrations completed successfully", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            target=target,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
