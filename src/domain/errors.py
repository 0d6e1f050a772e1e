"""Error taxonomy of the resource API.

Every client-facing failure is a ResourceApiError subclass carrying the
HTTP status it maps to, a code-minor identifier and a human-readable
description. Field-selection errors name the offending field; precondition
errors name the header involved. Nothing raised here is retried.
"""

from __future__ import annotations


class ResourceApiError(Exception):
    """Base class for deterministic, client-visible failures."""

    status_code: int = 400
    code_minor: str = "bad_request"
    default_description: str = "Invalid request"

    def __init__(
        self,
        description: str | None = None,
        *,
        field: str | None = None,
        header: str | None = None,
    ) -> None:
        self.description = description or self.default_description
        self.field = field
        self.header = header
        super().__init__(self.description)

    def to_dict(self) -> dict[str, str]:
        body = {"description": self.description, "codeMinor": self.code_minor}
        if self.field is not None:
            body["field"] = self.field
        if self.header is not None:
            body["header"] = self.header
        return body


class InvalidSelectionFieldException(ResourceApiError):
    """The fields parameter was supplied but blank."""

    code_minor = "invalid_selection_field"
    default_description = "Invalid selection field"


class InvalidFilterFieldException(ResourceApiError):
    """A field or filter name is malformed or not filterable."""

    code_minor = "invalid_filter_field"
    default_description = "Invalid filter field"


class InvalidTokenFormat(ResourceApiError):
    code_minor = "invalid_etag"
    default_description = "Invalid ETag format"


class BadRequest(ResourceApiError):
    """Domain validation failure: bad foreign key, bad ordering, duplicate key."""


class NotFound(ResourceApiError):
    """Target resource is absent or not active."""

    status_code = 404
    code_minor = "unknownobject"
    default_description = "Unknown Object"


class PreconditionFailed(ResourceApiError):
    """A conditional header was supplied but does not match the current version."""

    status_code = 412
    code_minor = "precondition_failed"
    default_description = (
        "Resource has been modified by another user. Please retrieve the latest version."
    )


class PreconditionRequired(ResourceApiError):
    """A mandatory conditional header is missing."""

    status_code = 428
    code_minor = "precondition_required"
    default_description = "If-Match header is required for this operation"


class ParameterNotFound(LookupError):
    """A value was looked up in a query parameter set it was never added to."""
