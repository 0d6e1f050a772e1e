"""Listing query options and service result containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE_SIZE = 25
DEFAULT_PAGINATION_OFFSET = 0


class QueryOptions(BaseModel):
    """Pagination options of a listing request.

    total_count asks the caller to report the unpaginated match count
    (the Total-Count response header); the repository always computes it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=0)
    offset: int = Field(default=DEFAULT_PAGINATION_OFFSET, ge=0)
    total_count: bool = Field(default=False, alias="totalCount")


@dataclass(frozen=True)
class ListResult:
    """A page of shaped payloads plus the total number of matching records."""

    items: list[dict[str, Any]] = field(default_factory=list)
    total_count: int = 0


@dataclass(frozen=True)
class ResourceResult:
    """A single shaped payload together with its version token."""

    payload: dict[str, Any]
    etag: str
