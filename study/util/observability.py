"""Logfire setup and instrumentation.

Application code logs and traces through logfire directly:

    with logfire.span("topic_service.create_topic", created_by=str(user_id)):
        ...
        logfire.info("Topic created", topic_id=str(topic.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from study.config import Settings

SERVICE_NAME = "study-backend"
SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Args:
        settings: Application settings
    """
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.should_send,
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
        send_to_logfire=observability.should_send,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    # Event streams reach here as websocket-like scopes without a method
    result = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    if method:
        result["method"] = method
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by the app.

    Headers are not captured because they carry bearer tokens.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, tagging them with the active span."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound calls to the object store."""
    logfire.instrument_httpx()
