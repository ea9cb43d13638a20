"""Logfire setup and instrumentation.

Domain services open a span per operation and emit structured events inside
it, for example::

    with logfire.span("engagement_service.react", post_id=str(post_id)):
        logfire.info("Reaction applied", state=transition.next_state.value)

This module configures where those go and hooks FastAPI and SQLAlchemy in.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import ObservabilitySettings, Settings

SERVICE_NAME = "postboard"
SERVICE_VERSION = "0.1.0"


def should_send(observability: ObservabilitySettings) -> bool:
    """Whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise a configured token turns
    sending on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Args:
        settings: Application settings
    """
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Headers are left out of spans because ``Authorization`` carries the
    caller's token. Span attributes are reduced to method and path.
    """

    def _request_attributes(request, attributes):
        result = dict(attributes)
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine, including the row locks
    taken when reacting to a post."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
