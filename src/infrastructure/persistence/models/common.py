"""Lifecycle columns shared by every resource table."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.models.enums import Status


class ResourceColumnsMixin:
    """id, status, createdate, lastmodifieddate, deletedate.

    status holds a Status value ('ACTIVE' / 'INACTIVE' / 'TO_BE_DELETED'),
    enforced at the application layer. deletedate is set only by soft delete.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    status: Mapped[str] = mapped_column(Text, nullable=False, default=Status.ACTIVE.value)
    createdate: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    lastmodifieddate: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    deletedate: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
