"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from study.config import Settings
from study.interface.api.routes import (
    attachments,
    comments,
    events,
    health,
    profiles,
    topics,
)
from study.util.di.container import create_container, setup_di
from study.util.observability import instrument_fastapi, instrument_httpx

ROUTERS = (
    health.router,
    topics.router,
    comments.router,
    attachments.router,
    profiles.router,
    events.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    # Disposes the database pool through the engine provider
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Create the FastAPI application.

    Logfire should already be configured; scripts/start_app.py does that
    before uvicorn imports this module.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Study Group API",
        description="Topics, schedules, threaded comments and file attachments "
        "for a study group",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_fastapi(app_instance)

    # Preflight responses are cached for ten minutes
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Cache-Control"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


app = create_app()
