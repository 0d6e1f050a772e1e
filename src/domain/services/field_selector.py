"""Caller-driven field selection.

The `fields` query parameter lets a caller ask for a subset of a
resource's client-visible fields. Validation rules:

    None                      → the full allow-list
    blank / whitespace only   → InvalidSelectionFieldException
    an empty token, or a token with characters outside [A-Za-z0-9]
                              → InvalidFilterFieldException
    duplicates                → collapsed, first occurrence kept
    any unknown field name    → the full allow-list

The last rule is a deliberate degrade policy: a mistyped field list yields
every field instead of an empty projection or an error.

shape_data() projects payloads to the selected fields. It understands
three payload shapes and returns the one it was given:

    {field: value, ...}                 a single record
    [{...}, {...}]                      a bare list of records
    {<collection key>: [{...}, ...]}    a wrapped collection
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from src.domain.errors import InvalidFilterFieldException, InvalidSelectionFieldException
from src.domain.models.enums import ResourceType
from src.domain.models.fields import query_config

FIELD_SEPARATOR = ","
VALID_FIELD_NAME = re.compile(r"[A-Za-z0-9]+")


class FieldSelector:
    """Validates field lists and projects payloads; all methods are static."""

    @staticmethod
    def validate_fields(resource_type: ResourceType, raw_fields: str | None) -> list[str]:
        valid_fields = list(query_config(resource_type).valid_fields)
        if raw_fields is None:
            return valid_fields
        if not raw_fields.strip():
            raise InvalidSelectionFieldException(
                "The fields parameter must not be blank", field="fields"
            )

        requested: list[str] = []
        for token in raw_fields.split(FIELD_SEPARATOR):
            if not VALID_FIELD_NAME.fullmatch(token):
                raise InvalidFilterFieldException(
                    f"Invalid field name {token!r} in fields parameter", field=token
                )
            if token not in requested:
                requested.append(token)

        allowed = set(valid_fields)
        if any(name not in allowed for name in requested):
            return valid_fields
        return requested

    @staticmethod
    def shape_data(payload: Any, fields: Sequence[str], resource_type: ResourceType) -> Any:
        collection_key = query_config(resource_type).collection_key
        if isinstance(payload, Mapping) and isinstance(payload.get(collection_key), list):
            return {
                **payload,
                collection_key: FieldSelector._shape_records(payload[collection_key], fields),
            }
        if isinstance(payload, list):
            return FieldSelector._shape_records(payload, fields)
        if isinstance(payload, Mapping):
            return FieldSelector._shape_record(payload, fields)
        raise TypeError(f"Cannot shape payload of type {type(payload).__name__}")

    @staticmethod
    def select(resource_type: ResourceType, raw_fields: str | None, payload: Any) -> Any:
        """Validate a raw fields parameter and project the payload with it."""
        fields = FieldSelector.validate_fields(resource_type, raw_fields)
        return FieldSelector.shape_data(payload, fields, resource_type)

    @staticmethod
    def _shape_records(
        records: Iterable[Mapping[str, Any]], fields: Sequence[str]
    ) -> list[dict[str, Any]]:
        return [FieldSelector._shape_record(record, fields) for record in records]

    @staticmethod
    def _shape_record(record: Mapping[str, Any], fields: Sequence[str]) -> dict[str, Any]:
        # Absent fields are omitted, never nulled.
        return {name: record[name] for name in fields if name in record}
