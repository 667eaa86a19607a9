"""Stdlib logging setup for third-party libraries.

Application events are emitted through logfire; uvicorn, SQLAlchemy and
asyncpg still log through the standard library.
"""

import logging
import sys

from hivemind.config import Settings

# Libraries that are chatty at INFO and only interesting when they fail
QUIET_LOGGERS = ("sqlalchemy.pool", "asyncpg", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).info(
        "Logging configured for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
