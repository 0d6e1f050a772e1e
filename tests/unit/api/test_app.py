"""Tests for the application factory and the catch-all error handler."""

from contextlib import asynccontextmanager
from types import SimpleNamespace

from sqlalchemy.ext.asyncio import AsyncEngine

from src.api import create_app
from src.api.dependencies import get_unit_of_work
from src.infrastructure.cache import ResponseCache
from src.infrastructure.config import Settings
from src.infrastructure.database import engine as module_engine
from src.infrastructure.persistence.unit_of_work import SqlUnitOfWork


class _FailingUnitOfWork:
    @asynccontextmanager
    async def read(self):
        raise RuntimeError("connection refused: secret-host:5432")
        yield

    transaction = read


# --- app state ---

def test_create_app_stores_settings_and_cache():
    settings = Settings(log_format="plain", cache_ttl_seconds=5)
    app = create_app(settings)
    assert app.state.settings is settings
    assert isinstance(app.state.cache, ResponseCache)


def test_create_app_bounds_cache_from_settings():
    app = create_app(Settings(log_format="plain", cache_max_entries=2))
    cache = app.state.cache
    for key in ("a", "b", "c"):
        cache.set(key, key)
    assert len(cache) == 2


def test_create_app_builds_engine_from_given_settings():
    settings = Settings(
        log_format="plain",
        database_url="postgresql+asyncpg://u:p@other-host:6543/other",
        database_echo=True,
    )
    app = create_app(settings)

    engine = app.state.engine
    assert isinstance(engine, AsyncEngine)
    assert engine is not module_engine
    assert (engine.url.host, engine.url.port, engine.url.database) == ("other-host", 6543, "other")
    assert engine.echo is True
    assert app.state.session_factory.kw["bind"] is engine


def test_unit_of_work_uses_app_session_factory():
    app = create_app(Settings(log_format="plain"))
    uow = get_unit_of_work(SimpleNamespace(app=app))
    assert isinstance(uow, SqlUnitOfWork)
    assert uow._session_factory is app.state.session_factory


# --- routing ---

def test_routes_mounted_under_prefix():
    app = create_app(Settings(log_format="plain", api_prefix="/data/v3/ed-fi"))
    paths = app.openapi()["paths"]
    assert "/data/v3/ed-fi/gradingPeriods" in paths
    assert "/data/v3/ed-fi/calendars/{id}" in paths
    assert "/ed-fi/gradingPeriods" not in paths


def test_prefixed_route_is_served(make_client):
    client = make_client(api_prefix="/data/v3/ed-fi")
    assert client.get("/data/v3/ed-fi/calendars").status_code == 200
    assert client.get("/ed-fi/calendars").status_code == 404


# --- errors ---

def test_unexpected_error_is_opaque_500(make_client):
    client = make_client(raise_server_exceptions=False)
    client.app.dependency_overrides[get_unit_of_work] = _FailingUnitOfWork

    response = client.get("/ed-fi/gradingPeriods")

    assert response.status_code == 500
    assert response.json() == {
        "description": "An unexpected error occurred",
        "codeMinor": "internal_server_error",
    }
    assert "secret-host" not in response.text
