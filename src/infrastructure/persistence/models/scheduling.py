"""Scheduling layer ORM models: grading periods and calendars.

Both carry the shared lifecycle columns. Natural keys are enforced by unique
constraints, the storage-level backstop for the check-then-insert performed
by the services. Foreign keys point at reference tables; there are no ORM
relationships, referenced rows are looked up explicitly when needed.
"""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base

from .common import ResourceColumnsMixin


class GradingPeriod(ResourceColumnsMixin, Base):
    __tablename__ = "gradingperiod"
    __table_args__ = (
        UniqueConstraint(
            "gradingperioddescriptorid",
            "periodsequence",
            "schoolid",
            "schoolyear",
            name="gradingperiod_pk",
        ),
        Index("fk_gradingperiod_school", "schoolid"),
        Index("fk_gradingperiod_schoolyeartype", "schoolyear"),
    )

    grading_period_descriptor_id: Mapped[int] = mapped_column(
        "gradingperioddescriptorid",
        Integer,
        ForeignKey("gradingperioddescriptor.gradingperioddescriptorid"),
        nullable=False,
    )
    grading_period_name: Mapped[str] = mapped_column("gradingperiodname", String(60), nullable=False)
    period_sequence: Mapped[int] = mapped_column("periodsequence", Integer, nullable=False)
    school_id: Mapped[int] = mapped_column(
        "schoolid", Integer, ForeignKey("school.schoolid"), nullable=False
    )
    school_year: Mapped[int] = mapped_column(
        "schoolyear", SmallInteger, ForeignKey("schoolyeartype.schoolyear"), nullable=False
    )
    begin_date: Mapped[date] = mapped_column("begindate", Date, nullable=False)
    end_date: Mapped[date] = mapped_column("enddate", Date, nullable=False)
    total_instructional_days: Mapped[int] = mapped_column(
        "totalinstructionaldays", Integer, nullable=False
    )


class Calendar(ResourceColumnsMixin, Base):
    __tablename__ = "calendar"
    __table_args__ = (
        UniqueConstraint("calendarcode", "schoolid", "schoolyear", name="calendar_pk"),
        Index("fk_calendar_calendartypedescriptor", "calendartypedescriptorid"),
    )

    calendar_code: Mapped[str] = mapped_column("calendarcode", String(60), nullable=False)
    school_id: Mapped[int] = mapped_column(
        "schoolid", Integer, ForeignKey("school.schoolid"), nullable=False
    )
    school_year: Mapped[int] = mapped_column(
        "schoolyear", SmallInteger, ForeignKey("schoolyeartype.schoolyear"), nullable=False
    )
    calendar_type_descriptor_id: Mapped[int] = mapped_column(
        "calendartypedescriptorid",
        Integer,
        ForeignKey("calendartypedescriptor.calendartypedescriptorid"),
        nullable=False,
    )
