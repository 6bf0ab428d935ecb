"""Logfire setup and instrumentation for the API and the database."""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from ctfhub.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire.

    Events are sent to Logfire when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says
    so, or else whenever a token is configured. They always go to the
    console.
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name="ctfhub-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token or None,
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


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request by method and path.

    Headers are never captured, since they carry bearer tokens.
    """

    def _request_attributes(request, attributes):
        return {
            **attributes,
            "method": request.method,
            "path": request.url.path,
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
