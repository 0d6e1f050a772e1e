"""ORM model registry: imports all layer modules so every mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.

Import order follows the dependency graph (referenced tables first).
"""

from src.infrastructure.persistence.models.reference import (
    CalendarTypeDescriptor,
    Descriptor,
    GradingPeriodDescriptor,
    School,
    SchoolYearType,
)
from src.infrastructure.persistence.models.scheduling import (
    Calendar,
    GradingPeriod,
)

__all__ = [
    # Reference
    "CalendarTypeDescriptor",
    "Descriptor",
    "GradingPeriodDescriptor",
    "School",
    "SchoolYearType",
    # Scheduling
    "Calendar",
    "GradingPeriod",
]
