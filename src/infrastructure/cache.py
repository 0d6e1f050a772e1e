"""In-process TTL cache for read responses.

Keys are built from the resource type, the operation and the effective
query (filters, pagination, selected fields, id), so two requests share an
entry only when they would produce the same response. Writes invalidate
every entry of the resource type they touched.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

KEY_SEPARATOR = ":"


class ResponseCache:
    """TTL map bounded to max_entries.

    Expired entries are swept on every write. When the map is still full,
    the oldest entries (by insertion) are evicted first. A max_entries of
    0 leaves the size unbounded.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    @property
    def enabled(self) -> bool:
        return self._ttl > 0

    @staticmethod
    def key(resource_type: str, operation: str, **query: Any) -> str:
        normalized = json.dumps(query, sort_keys=True, default=str, separators=(",", ":"))
        return KEY_SEPARATOR.join((resource_type, operation, normalized))

    def get(self, key: str) -> Any | None:
        if not self.enabled:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        logger.debug("Cache hit", extra={"cache_key": key})
        return value

    def set(self, key: str, value: Any) -> None:
        if not self.enabled:
            return
        now = self._clock()
        self._prune_expired(now)
        # Re-inserting moves the key to the newest position.
        self._entries.pop(key, None)
        if self._max_entries:
            while len(self._entries) >= self._max_entries:
                del self._entries[next(iter(self._entries))]
        self._entries[key] = (now + self._ttl, value)

    def _prune_expired(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def invalidate(self, resource_type: str) -> int:
        """Drop every entry for resource_type and return how many were dropped."""
        prefix = resource_type + KEY_SEPARATOR
        stale = [key for key in self._entries if key.startswith(prefix)]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(
                "Cache invalidated", extra={"resource_type": resource_type, "dropped": len(stale)}
            )
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
