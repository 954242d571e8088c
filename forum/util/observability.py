"""Logfire setup.

Spans and structured events come from logfire throughout the code base,
for example:

    with logfire.span("vote_service.cast_vote", thread_id=str(thread_id)):
        logfire.info("Thread vote cast", net_score=thread.net_score)

This module configures the SDK once at startup and wires the FastAPI and
SQLAlchemy integrations.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

# Path parameters copied onto request spans so traces can be filtered by them
_TRACED_PATH_PARAMS = ("thread_id", "reply_id", "user_id")


def _should_send(observability: ObservabilitySettings) -> bool:
    """Explicit setting wins, otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship telemetry to Logfire cloud, or
    OBSERVABILITY__SEND_TO_LOGFIRE=false to keep it on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = _should_send(observability)

    logfire.configure(
        service_name="forum-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
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
        send_to_logfire=send,
        serialize_thread_writes=settings.voting.serialize_thread_writes,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the forum ids found in the path."""
    result = dict(attributes)
    path_params = getattr(request, "path_params", None) or {}
    for name in _TRACED_PATH_PARAMS:
        if name in path_params:
            result[name] = str(path_params[name])
    if getattr(request, "client", None):
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the FOR UPDATE thread reads.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.debug("SQLAlchemy instrumented", url=engine.url.render_as_string())
