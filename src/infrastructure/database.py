"""Async SQLAlchemy engine and session factory.

Sessions are opened by SqlUnitOfWork (persistence/unit_of_work.py), never
directly by request handlers. create_app builds its own engine from the
settings it is given; the module-level engine serves callers outside an
application, such as scripts.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.infrastructure.config import Settings, get_settings


def build_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


settings = get_settings()

engine = build_engine(settings)

AsyncSessionLocal = build_session_factory(engine)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


__all__ = [
    "AsyncSessionLocal",
    "Base",
    "Settings",
    "build_engine",
    "build_session_factory",
    "engine",
    "settings",
]
