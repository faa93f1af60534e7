"""Response envelope and typed response contracts.

Every paginated Optix field answers with the same `{ data [...] total }`
shape; Page enforces that shape so tools never look up alternative field
names at runtime.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from domain.errors import ResponseShapeError


class GraphQLErrorEntry(BaseModel):
    """One entry of a GraphQL `errors` array. Unknown keys (locations...) are kept."""
    model_config = ConfigDict(extra="allow")

    message: str
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class ResponseEnvelope(BaseModel):
    """
    Standard GraphQL response.

    Invariant: if errors is non-empty, data is treated as unreliable and the
    call is surfaced as failed.
    """
    data: Any = None
    errors: list[GraphQLErrorEntry] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return len(self.errors) > 0


class Page(BaseModel):
    """
    Typed contract for a paginated list field.

    Fields:
        data: Records of the current page (raw, passed through untouched)
        total: Remote total count, None when the template does not request it
    """
    data: list[dict[str, Any]] = Field(default_factory=list)
    total: int | None = None

    @property
    def returned(self) -> int:
        return len(self.data)


def unwrap_page(payload: dict[str, Any] | None, field: str) -> Page:
    """
    Extract a paginated field from a GraphQL `data` object.

    Args:
        payload: The `data` object of the response
        field: Top-level field name, e.g. "bookings"

    Raises:
        ResponseShapeError: If the field is missing or not page-shaped
    """
    if not isinstance(payload, dict) or field not in payload:
        raise ResponseShapeError(f"response has no '{field}' field")
    value = payload[field]
    if value is None:
        return Page()
    try:
        return Page.model_validate(value)
    except PydanticValidationError as e:
        raise ResponseShapeError(f"'{field}' is not a page of records: {e.errors()[0]['msg']}") from e


def unwrap_object(payload: dict[str, Any] | None, field: str) -> dict[str, Any] | None:
    """
    Extract a single-object field from a GraphQL `data` object.

    Returns:
        The object, or None when the remote API returned null (not found)

    Raises:
        ResponseShapeError: If the field is absent or not an object
    """
    if not isinstance(payload, dict) or field not in payload:
        raise ResponseShapeError(f"response has no '{field}' field")
    value = payload[field]
    if value is not None and not isinstance(value, dict):
        raise ResponseShapeError(f"'{field}' is not an object")
    return value
