"""Explicit request validation.

Each check is a plain function returning a ValidationResult; composed
validators merge the results of the checks a request model needs. Nothing
here raises: services decide how to surface violations (they raise
BadRequest with the joined messages).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.requests import CreateCalendarRequest, CreateGradingPeriodRequest

MAX_NAME_LENGTH = 60
MIN_SCHOOL_YEAR = 1900


@dataclass(frozen=True)
class ValidationResult:
    violations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.violations

    def merge(self, *others: ValidationResult) -> ValidationResult:
        merged = list(self.violations)
        for other in others:
            merged.extend(other.violations)
        return ValidationResult(tuple(merged))

    @classmethod
    def combine(cls, *results: ValidationResult) -> ValidationResult:
        return cls().merge(*results)

    def message(self) -> str:
        return "; ".join(self.violations)


OK = ValidationResult()


def _violation(message: str) -> ValidationResult:
    return ValidationResult((message,))


def require_non_empty(value: str | None, label: str) -> ValidationResult:
    if value is None or not value.strip():
        return _violation(f"{label} is required")
    return OK


def require_max_length(value: str | None, max_length: int, label: str) -> ValidationResult:
    if value is not None and len(value) > max_length:
        return _violation(f"{label} must be at most {max_length} characters")
    return OK


def require_positive(value: int, label: str) -> ValidationResult:
    if value <= 0:
        return _violation(f"{label} must be positive")
    return OK


def require_minimum(value: int, minimum: int, label: str) -> ValidationResult:
    if value < minimum:
        return _violation(f"{label} must be at least {minimum}")
    return OK


def require_date_order(begin: date, end: date) -> ValidationResult:
    """End strictly after begin."""
    if end <= begin:
        return _violation("End date must be after begin date")
    return OK


def parse_descriptor_id(value: str | None) -> int | None:
    """Extract the numeric descriptor id from "3" or "uri://...Descriptor#3".

    Returns None when no positive integer id can be read.
    """
    if value is None:
        return None
    candidate = value.rsplit("#", 1)[-1].strip()
    if not (candidate.isascii() and candidate.isdigit()):
        return None
    descriptor_id = int(candidate)
    return descriptor_id if descriptor_id > 0 else None


def require_descriptor(value: str | None, label: str) -> ValidationResult:
    """Non-empty and carrying a positive numeric descriptor id."""
    missing = require_non_empty(value, label.capitalize())
    if not missing.ok:
        return missing
    if parse_descriptor_id(value) is None:
        return _violation(f"Invalid {label}: {value}")
    return OK


def validate_create_grading_period(request: CreateGradingPeriodRequest) -> ValidationResult:
    """Structural checks for a new grading period.

    Date ordering is checked separately by the service, after the
    existence and foreign-key checks.
    """
    return ValidationResult.combine(
        require_descriptor(request.grading_period_descriptor, "grading period descriptor"),
        require_non_empty(request.grading_period_name, "Grading period name"),
        require_max_length(request.grading_period_name, MAX_NAME_LENGTH, "Grading period name"),
        require_positive(request.school_reference.school_id, "School ID"),
        require_minimum(
            request.school_year_type_reference.school_year, MIN_SCHOOL_YEAR, "School year"
        ),
        require_positive(request.period_sequence, "Period sequence"),
        require_positive(request.total_instructional_days, "Total instructional days"),
    )


def validate_create_calendar(request: CreateCalendarRequest) -> ValidationResult:
    return ValidationResult.combine(
        require_non_empty(request.calendar_code, "Calendar code"),
        require_max_length(request.calendar_code, MAX_NAME_LENGTH, "Calendar code"),
        require_positive(request.school_reference.school_id, "School ID"),
        require_minimum(
            request.school_year_type_reference.school_year, MIN_SCHOOL_YEAR, "School year"
        ),
        require_descriptor(request.calendar_type_descriptor, "calendar type descriptor"),
    )
