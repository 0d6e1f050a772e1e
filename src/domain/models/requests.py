"""Inbound request models for resource creation.

Field names follow the client-facing (camelCase) representation through
aliases; populate_by_name lets tests and services use the snake_case names.
Only types are enforced here. Business constraints (non-empty, lengths,
positivity, date ordering) are explicit functions in
services/validation.py so they can be composed and tested on their own.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    rel: str
    href: str


class SchoolReference(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school_id: int = Field(alias="schoolId")
    link: Link | None = None


class SchoolYearTypeReference(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school_year: int = Field(alias="schoolYear")
    link: Link | None = None


class GradeLevel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    grade_level_descriptor: str = Field(alias="gradeLevelDescriptor")


class CreateGradingPeriodRequest(BaseModel):
    """Body of POST /gradingPeriods.

    grading_period_descriptor accepts either a bare descriptor id ("3") or a
    descriptor URI whose fragment is the id
    ("uri://ed-fi.org/GradingPeriodDescriptor#3").
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    grading_period_descriptor: str = Field(alias="gradingPeriodDescriptor")
    grading_period_name: str = Field(alias="gradingPeriodName")
    school_reference: SchoolReference = Field(alias="schoolReference")
    school_year_type_reference: SchoolYearTypeReference = Field(alias="schoolYearTypeReference")
    period_sequence: int = Field(alias="periodSequence")
    begin_date: date = Field(alias="beginDate")
    end_date: date = Field(alias="endDate")
    total_instructional_days: int = Field(alias="totalInstructionalDays")


class CreateCalendarRequest(BaseModel):
    """Body of POST /calendars."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    calendar_code: str = Field(alias="calendarCode")
    school_reference: SchoolReference = Field(alias="schoolReference")
    school_year_type_reference: SchoolYearTypeReference = Field(alias="schoolYearTypeReference")
    calendar_type_descriptor: str = Field(alias="calendarTypeDescriptor")
    grade_levels: list[GradeLevel] = Field(default_factory=list, alias="gradeLevels")
