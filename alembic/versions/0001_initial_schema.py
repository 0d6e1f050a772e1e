"""Initial schema: reference tables, grading periods, calendars.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _lifecycle_columns() -> list[sa.Column]:
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("status", sa.Text, nullable=False, server_default="ACTIVE"),
        sa.Column(
            "createdate",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "lastmodifieddate",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deletedate", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # ------------------------------------------------------------------ #
    # 1. REFERENCE LAYER                                                   #
    # ------------------------------------------------------------------ #

    op.create_table(
        "descriptor",
        sa.Column("descriptorid", sa.Integer, primary_key=True),
        sa.Column("namespace", sa.String(255), nullable=False),
        sa.Column("codevalue", sa.String(50), nullable=False),
        sa.Column("shortdescription", sa.String(75), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.UniqueConstraint(
            "namespace", "codevalue", name="uq_descriptor_namespace_codevalue"
        ),
    )

    op.create_table(
        "gradingperioddescriptor",
        sa.Column(
            "gradingperioddescriptorid",
            sa.Integer,
            sa.ForeignKey("descriptor.descriptorid", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "calendartypedescriptor",
        sa.Column(
            "calendartypedescriptorid",
            sa.Integer,
            sa.ForeignKey("descriptor.descriptorid", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "school",
        sa.Column("schoolid", sa.Integer, primary_key=True),
        sa.Column("nameofinstitution", sa.String(75), nullable=False),
    )

    op.create_table(
        "schoolyeartype",
        sa.Column("schoolyear", sa.SmallInteger, primary_key=True),
        sa.Column("schoolyeardescription", sa.String(50), nullable=False),
        sa.Column("currentschoolyear", sa.Boolean, nullable=False, server_default=sa.false()),
    )

    # ------------------------------------------------------------------ #
    # 2. SCHEDULING LAYER                                                  #
    # ------------------------------------------------------------------ #

    op.create_table(
        "gradingperiod",
        *_lifecycle_columns(),
        sa.Column(
            "gradingperioddescriptorid",
            sa.Integer,
            sa.ForeignKey("gradingperioddescriptor.gradingperioddescriptorid"),
            nullable=False,
        ),
        sa.Column("gradingperiodname", sa.String(60), nullable=False),
        sa.Column("periodsequence", sa.Integer, nullable=False),
        sa.Column("schoolid", sa.Integer, sa.ForeignKey("school.schoolid"), nullable=False),
        sa.Column(
            "schoolyear",
            sa.SmallInteger,
            sa.ForeignKey("schoolyeartype.schoolyear"),
            nullable=False,
        ),
        sa.Column("begindate", sa.Date, nullable=False),
        sa.Column("enddate", sa.Date, nullable=False),
        sa.Column("totalinstructionaldays", sa.Integer, nullable=False),
        sa.UniqueConstraint(
            "gradingperioddescriptorid",
            "periodsequence",
            "schoolid",
            "schoolyear",
            name="gradingperiod_pk",
        ),
    )
    op.create_index("fk_gradingperiod_school", "gradingperiod", ["schoolid"])
    op.create_index("fk_gradingperiod_schoolyeartype", "gradingperiod", ["schoolyear"])

    op.create_table(
        "calendar",
        *_lifecycle_columns(),
        sa.Column("calendarcode", sa.String(60), nullable=False),
        sa.Column("schoolid", sa.Integer, sa.ForeignKey("school.schoolid"), nullable=False),
        sa.Column(
            "schoolyear",
            sa.SmallInteger,
            sa.ForeignKey("schoolyeartype.schoolyear"),
            nullable=False,
        ),
        sa.Column(
            "calendartypedescriptorid",
            sa.Integer,
            sa.ForeignKey("calendartypedescriptor.calendartypedescriptorid"),
            nullable=False,
        ),
        sa.UniqueConstraint("calendarcode", "schoolid", "schoolyear", name="calendar_pk"),
    )
    op.create_index(
        "fk_calendar_calendartypedescriptor", "calendar", ["calendartypedescriptorid"]
    )


def downgrade() -> None:
    op.drop_index("fk_calendar_calendartypedescriptor", table_name="calendar")
    op.drop_table("calendar")
    op.drop_index("fk_gradingperiod_schoolyeartype", table_name="gradingperiod")
    op.drop_index("fk_gradingperiod_school", table_name="gradingperiod")
    op.drop_table("gradingperiod")
    op.drop_table("schoolyeartype")
    op.drop_table("school")
    op.drop_table("calendartypedescriptor")
    op.drop_table("gradingperioddescriptor")
    op.drop_table("descriptor")
