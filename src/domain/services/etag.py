"""Concurrency token (ETag) service.

A resource's version token is its last-modified timestamp rendered as a
quoted ISO-8601 UTC string, e.g. "2025-05-29T07:53:44.000Z". Two records
are the same version iff their tokens are byte-equal.

Using the timestamp itself as the version avoids a separate version column.
Writes that land within the timestamp's resolution map to the same token;
there is no compensating sequence counter.

Conditional-request rules:
    If-Match       required before update/delete; must equal the current
                   token or be the wildcard "*".
    If-None-Match  optional on create; equal to an existing record's token
                   means the caller already holds that version.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from src.domain.errors import InvalidTokenFormat, PreconditionFailed, PreconditionRequired
from src.domain.models.resources import ResourceRecord

logger = logging.getLogger(__name__)

WILDCARD = "*"
IF_MATCH_HEADER = "If-Match"
IF_NONE_MATCH_HEADER = "If-None-Match"


def isoformat_utc(timestamp: datetime) -> str:
    """Render a timestamp as an ISO-8601 UTC string with a Z suffix.

    Naive datetimes are taken to be UTC already. Milliseconds are always
    emitted; microseconds only when the value carries them.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    else:
        timestamp = timestamp.astimezone(timezone.utc)
    timespec = "milliseconds" if timestamp.microsecond % 1000 == 0 else "microseconds"
    return timestamp.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


class ETagService:
    """Derives, parses and checks version tokens.

    Stateless; every method is safe to call concurrently.
    """

    def generate(self, timestamp: datetime) -> str:
        """Quote the UTC rendering of timestamp.

        parse(generate(t)) == t holds for aware t. A naive t comes back as the
        same wall time tagged UTC; ResourceRecord tags its timestamps that way
        on construction, so record tokens always round-trip.
        """
        return f'"{isoformat_utc(timestamp)}"'

    def for_record(self, record: ResourceRecord) -> str:
        return self.generate(record.version_timestamp)

    def parse(self, token: str) -> datetime:
        """Parse a token back to an aware UTC datetime.

        Raises:
            InvalidTokenFormat: the unquoted value is not an ISO-8601 timestamp.
        """
        cleaned = token.replace('"', "").strip()
        if cleaned.endswith(("Z", "z")):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(cleaned)
        except ValueError as exc:
            raise InvalidTokenFormat(f"Invalid ETag format: {token!r}") from exc
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    def validate_if_match(self, supplied: str | None, current: str) -> None:
        """Guard a mutation against lost updates.

        Raises:
            PreconditionRequired: no If-Match value was supplied.
            PreconditionFailed: the supplied token is stale.
        """
        if not supplied:
            raise PreconditionRequired(
                "If-Match header is required for this operation", header=IF_MATCH_HEADER
            )
        if supplied != current and supplied != WILDCARD:
            logger.warning(
                "If-Match precondition failed",
                extra={"supplied_etag": supplied, "current_etag": current},
            )
            raise PreconditionFailed(header=IF_MATCH_HEADER)

    def validate_if_none_match(self, supplied: str | None, existing: str | None) -> None:
        """Reject a create when the caller already holds the existing version.

        Absent values are never errors.
        """
        if supplied and existing and supplied == existing:
            raise PreconditionFailed(
                "Resource already exists with this version", header=IF_NONE_MATCH_HEADER
            )

    def is_modified_since(self, current: str | None, client: str | None) -> bool:
        """True unless both tokens parse and the current one is not newer.

        Missing or malformed tokens degrade to "assume changed".
        """
        if not current or not client:
            return True
        try:
            return self.parse(current) > self.parse(client)
        except InvalidTokenFormat:
            return True
