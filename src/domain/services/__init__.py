"""Domain services package."""

from .calendars import CalendarService
from .etag import ETagService
from .field_selector import FieldSelector
from .grading_periods import GradingPeriodService
from .resources import ResourceService

__all__ = [
    "CalendarService",
    "ETagService",
    "FieldSelector",
    "GradingPeriodService",
    "ResourceService",
]
