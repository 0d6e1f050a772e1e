"""FastAPI application factory.

    uvicorn src.api.app:create_app --factory

Every setting is honoured per app: the engine and session factory are
built from the settings passed in and kept on app.state.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.errors import install_exception_handlers
from src.api.routers import calendars, grading_periods
from src.infrastructure.cache import ResponseCache
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.database import build_engine, build_session_factory
from src.infrastructure.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    yield
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Education Resource API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.cache = ResponseCache(
        settings.cache_ttl_seconds, max_entries=settings.cache_max_entries
    )

    install_exception_handlers(app)
    app.include_router(grading_periods.router, prefix=settings.api_prefix)
    app.include_router(calendars.router, prefix=settings.api_prefix)
    return app
