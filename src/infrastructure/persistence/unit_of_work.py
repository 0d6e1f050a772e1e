"""Session-scoped unit of work over async_sessionmaker.

read() opens a session without an explicit transaction; transaction()
wraps the session in session.begin(), which commits when the block exits
normally and rolls back on any exception, cancellation included. The
session is closed on every exit path.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.repositories.unit_of_work import Repositories, UnitOfWork
from src.infrastructure.persistence.repositories import get_repositories

logger = logging.getLogger(__name__)


class SqlUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @asynccontextmanager
    async def read(self) -> AsyncIterator[Repositories]:
        async with self._session_factory() as session:
            yield get_repositories(session)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Repositories]:
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    yield get_repositories(session)
            except BaseException as exc:
                logger.warning(
                    "Transaction rolled back",
                    extra={"error": type(exc).__name__},
                )
                raise
