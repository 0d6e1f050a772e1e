import pytest
from fastapi.testclient import TestClient

from src.api import create_app
from src.api.dependencies import get_unit_of_work
from src.infrastructure.config import Settings


@pytest.fixture
def make_client(uow):
    """Build a client over the in-memory unit of work with overridable settings."""

    def _make(raise_server_exceptions=True, **overrides):
        settings = Settings(log_format="plain", **overrides)
        app = create_app(settings)
        app.dependency_overrides[get_unit_of_work] = lambda: uow
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
