"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .enums import DescriptorKind, ResourceType, Status
from .fields import RESOURCE_QUERY_CONFIG, ResourceQueryConfig, query_config
from .query import ListResult, QueryOptions, ResourceResult
from .requests import (
    CreateCalendarRequest,
    CreateGradingPeriodRequest,
    GradeLevel,
    Link,
    SchoolReference,
    SchoolYearTypeReference,
)
from .resources import Calendar, Descriptor, GradingPeriod, ResourceRecord

__all__ = [
    # enums
    "DescriptorKind",
    "ResourceType",
    "Status",
    # resources
    "ResourceRecord",
    "GradingPeriod",
    "Calendar",
    "Descriptor",
    # query
    "QueryOptions",
    "ListResult",
    "ResourceResult",
    "RESOURCE_QUERY_CONFIG",
    "ResourceQueryConfig",
    "query_config",
    # requests
    "Link",
    "SchoolReference",
    "SchoolYearTypeReference",
    "GradeLevel",
    "CreateGradingPeriodRequest",
    "CreateCalendarRequest",
]
