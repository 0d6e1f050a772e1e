"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the repository implementations, the DI factory and the
unit of work.
"""

from src.infrastructure.persistence.models import *  # noqa: F401, F403
from src.infrastructure.persistence.models import __all__ as _orm_all
from src.infrastructure.persistence.repositories import (
    Repositories,
    SqlCalendarRepository,
    SqlGradingPeriodRepository,
    SqlReferenceRepository,
    SqlResourceRepository,
    get_repositories,
)
from src.infrastructure.persistence.unit_of_work import SqlUnitOfWork

__all__ = _orm_all + [
    "Repositories",
    "SqlResourceRepository",
    "SqlGradingPeriodRepository",
    "SqlCalendarRepository",
    "SqlReferenceRepository",
    "SqlUnitOfWork",
    "get_repositories",
]
