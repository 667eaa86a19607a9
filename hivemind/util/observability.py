"""Logfire setup and instrumentation.

Domain services open their own spans:

    with logfire.span("vote_ledger.cast", votable_id=str(target.id)):
        ...
        logfire.info("Vote record created", state=saved.state.value)

This module configures the exporter and adds the request and query spans
around them.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hivemind.config import Settings

SERVICE_NAME = "hivemind-api"
SERVICE_VERSION = "0.1.0"

# Endpoint parameters that may appear on request spans
TRACED_PARAMETER_SUFFIX = "_id"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry is sent to Logfire when OBSERVABILITY__SEND_TO_LOGFIRE is true,
    or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present. Otherwise
    events only go to the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = observability.send_to_logfire
    if send_to_logfire is None:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Keep identifiers and validation errors on request spans.

    Caller tokens (cookie and header) and message bodies are dropped.
    """
    values = attributes.get("values") or {}
    return {
        "values": {
            name: value
            for name, value in values.items()
            if name.endswith(TRACED_PARAMETER_SUFFIX)
        },
        "errors": attributes.get("errors") or [],
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its route, status and duration.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the row locks taken per operation.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
