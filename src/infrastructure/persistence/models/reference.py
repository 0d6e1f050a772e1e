"""Reference layer ORM models: descriptors, schools, school years.

Descriptors live in one shared table; each descriptor kind has a subtype
table whose primary key is also a foreign key into `descriptor`. A
descriptor id is a valid grading-period descriptor only if it appears in
`gradingperioddescriptor`, and so on.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, SmallInteger, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


class Descriptor(Base):
    """Enumerated code value shared across resource types."""

    __tablename__ = "descriptor"
    __table_args__ = (
        UniqueConstraint("namespace", "codevalue", name="uq_descriptor_namespace_codevalue"),
    )

    descriptor_id: Mapped[int] = mapped_column("descriptorid", Integer, primary_key=True)
    namespace: Mapped[str] = mapped_column(String(255), nullable=False)
    code_value: Mapped[str] = mapped_column("codevalue", String(50), nullable=False)
    short_description: Mapped[str] = mapped_column("shortdescription", String(75), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class GradingPeriodDescriptor(Base):
    __tablename__ = "gradingperioddescriptor"

    grading_period_descriptor_id: Mapped[int] = mapped_column(
        "gradingperioddescriptorid",
        Integer,
        ForeignKey("descriptor.descriptorid", ondelete="CASCADE"),
        primary_key=True,
    )


class CalendarTypeDescriptor(Base):
    __tablename__ = "calendartypedescriptor"

    calendar_type_descriptor_id: Mapped[int] = mapped_column(
        "calendartypedescriptorid",
        Integer,
        ForeignKey("descriptor.descriptorid", ondelete="CASCADE"),
        primary_key=True,
    )


class School(Base):
    __tablename__ = "school"

    school_id: Mapped[int] = mapped_column("schoolid", Integer, primary_key=True)
    name_of_institution: Mapped[str] = mapped_column("nameofinstitution", String(75), nullable=False)


class SchoolYearType(Base):
    __tablename__ = "schoolyeartype"

    school_year: Mapped[int] = mapped_column("schoolyear", SmallInteger, primary_key=True)
    school_year_description: Mapped[str] = mapped_column(
        "schoolyeardescription", String(50), nullable=False
    )
    current_school_year: Mapped[bool] = mapped_column(
        "currentschoolyear", Boolean, nullable=False, default=False
    )
