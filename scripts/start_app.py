#!/usr/bin/env python3
"""Serve the Hivemind API with uvicorn.

Logfire is configured before the app module is imported so that failures
while building the app are reported too.
"""

import sys

import logfire
import uvicorn

from hivemind.config import Settings
from hivemind.util.logging import setup_logging
from hivemind.util.observability import configure_logfire


def main() -> int:
    """Configure observability, then hand over to uvicorn."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Hivemind API",
            environment=settings.environment,
            port=settings.api.port,
        )
        uvicorn.run(
            "hivemind.interface.api.app:app",
            host="0.0.0.0",
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
