"""Unit-of-work interface.

Services never open sessions themselves. They ask a UnitOfWork for a
Repositories bundle scoped either to a plain read or to a transaction:

    async with uow.read() as repos:            # lookups, listings
        ...
    async with uow.transaction() as repos:     # create / delete
        ...                                     # commit on exit, rollback on error

All repositories in one bundle share the same session, so checks and
writes made inside transaction() are atomic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from src.domain.models.resources import Calendar, GradingPeriod

from .base import ResourceRepository
from .reference import ReferenceRepository


@dataclass
class Repositories:
    """All repository instances bound to a single session."""

    grading_periods: ResourceRepository[GradingPeriod]
    calendars: ResourceRepository[Calendar]
    reference: ReferenceRepository


class UnitOfWork(ABC):
    @abstractmethod
    def read(self) -> AbstractAsyncContextManager[Repositories]:
        """Repositories for read-only work, outside an explicit transaction."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[Repositories]:
        """Repositories inside one transaction, released on every exit path."""
