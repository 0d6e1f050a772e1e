"""Domain enumerations for the education resource API.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (FastAPI / Pydantic default behaviour).
"""

from enum import Enum


class Status(str, Enum):
    """Lifecycle status shared by every resource table."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "TO_BE_DELETED"


class ResourceType(str, Enum):
    """Client-visible resource types that support field selection."""

    USERS = "Users"
    STUDENTS = "Students"
    STAFF = "Staff"
    COURSES = "Courses"
    CREDENTIALS = "Credentials"
    GRADING_PERIODS = "GradingPeriods"
    CALENDARS = "Calendars"


class DescriptorKind(str, Enum):
    """Descriptor subtype tables a foreign key can point into."""

    GRADING_PERIOD = "GradingPeriodDescriptor"
    CALENDAR_TYPE = "CalendarTypeDescriptor"
