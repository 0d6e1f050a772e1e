"""HTTP surface: FastAPI application factory, dependencies and routers."""

from .app import create_app

__all__ = ["create_app"]
