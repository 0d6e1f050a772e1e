"""Bind-parameter bookkeeping for dynamically built SQL predicates.

Filter clauses are composed independently per field, so the same literal
(e.g. one status value OR-ed across several clauses) can be requested more
than once. QueryParameterManager hands out one placeholder per distinct
value so such repeats do not inflate the statement's bind parameters.

Values are compared structurally, not by identity:
    datetime / date   → UTC ISO-8601 string
    dict / list       → JSON with sorted keys
    anything else     → str(value)

Placeholders are 1-indexed in first-seen order. SQLAlchemy text() clauses
use named binds, so placeholder n is rendered as ":p<n>".
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from src.domain.errors import ParameterNotFound
from src.domain.services.etag import isoformat_utc

PLACEHOLDER_PREFIX = "p"


def _parameter_key(value: Any) -> str:
    if isinstance(value, datetime):
        return isoformat_utc(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, sort_keys=True, default=str)
    return str(value)


class QueryParameterManager:
    """Ordered, deduplicated parameter list for one query build."""

    def __init__(self) -> None:
        self._parameters: list[Any] = []
        self._placeholders: dict[str, int] = {}

    def add_parameter(self, value: Any) -> None:
        key = _parameter_key(value)
        if key not in self._placeholders:
            self._parameters.append(value)
            self._placeholders[key] = len(self._parameters)

    def add_parameters(self, values: Iterable[Any]) -> None:
        for value in values:
            self.add_parameter(value)

    def get_placeholder(self, value: Any) -> int:
        key = _parameter_key(value)
        try:
            return self._placeholders[key]
        except KeyError:
            raise ParameterNotFound(f"Parameter {key!r} not found") from None

    def get_parameters(self) -> list[Any]:
        return list(self._parameters)

    def placeholder(self, value: Any) -> str:
        """Named bind marker (":p3") for a registered value."""
        return f":{PLACEHOLDER_PREFIX}{self.get_placeholder(value)}"

    def bind_parameters(self) -> dict[str, Any]:
        return {
            f"{PLACEHOLDER_PREFIX}{index}": value
            for index, value in enumerate(self._parameters, start=1)
        }

    def __len__(self) -> int:
        return len(self._parameters)
