"""Resource domain models.

These are pure domain objects — no ORM or persistence concerns.

Every resource shares the common lifecycle columns carried by
ResourceRecord: a surrogate id, a status, creation / last-modified
timestamps and an optional deletion timestamp. The last-modified timestamp
is the substrate for version tokens (see services/etag.py); it is never
copied into a separate version column.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import Status


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResourceRecord(BaseModel):
    """Common identity and lifecycle fields of every persisted resource.

    Invariants:
      - lastmodifieddate is never earlier than createdate
      - a TO_BE_DELETED record always carries a deletedate
      - timestamps are timezone-aware; naive input is taken as UTC
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    status: Status = Status.ACTIVE
    createdate: datetime = Field(default_factory=_utcnow)
    lastmodifieddate: datetime | None = None
    deletedate: datetime | None = None

    @field_validator("createdate", "lastmodifieddate", "deletedate")
    @classmethod
    def _naive_timestamps_are_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _lifecycle_is_consistent(self) -> ResourceRecord:
        if self.lastmodifieddate is not None and self.lastmodifieddate < self.createdate:
            raise ValueError(
                f"lastmodifieddate ({self.lastmodifieddate.isoformat()}) precedes "
                f"createdate ({self.createdate.isoformat()})"
            )
        if self.status is Status.DELETED and self.deletedate is None:
            raise ValueError("A deleted record must carry a deletedate")
        return self

    @property
    def version_timestamp(self) -> datetime:
        """Timestamp the version token is derived from."""
        return self.lastmodifieddate or self.createdate

    @property
    def is_active(self) -> bool:
        return self.status is Status.ACTIVE


class GradingPeriod(ResourceRecord):
    """A segment of the school year in which performance is evaluated.

    Natural key: (grading_period_descriptor_id, period_sequence, school_id,
    school_year).
    """

    grading_period_descriptor_id: int
    grading_period_name: str
    period_sequence: int
    school_id: int
    school_year: int
    begin_date: date
    end_date: date
    total_instructional_days: int

    @property
    def natural_key(self) -> tuple[int, int, int, int]:
        return (
            self.grading_period_descriptor_id,
            self.period_sequence,
            self.school_id,
            self.school_year,
        )


class Calendar(ResourceRecord):
    """A school calendar for one school year.

    Natural key: (calendar_code, school_id, school_year).
    """

    calendar_code: str
    school_id: int
    school_year: int
    calendar_type_descriptor_id: int

    @property
    def natural_key(self) -> tuple[str, int, int]:
        return (self.calendar_code, self.school_id, self.school_year)


class Descriptor(BaseModel):
    """Shared reference value (an enumerated code) referenced by foreign key."""

    model_config = ConfigDict(frozen=True)

    descriptor_id: int
    namespace: str
    code_value: str
    short_description: str

    @property
    def uri(self) -> str:
        return f"{self.namespace}#{self.code_value}"
