"""Error taxonomy for tool execution.

Every failure past startup is converted into a ToolResult with isError=True
by the dispatcher. Each error renders its own agent-facing message so the
agent can see exactly which precondition failed.
"""

import json
from typing import Any


class ToolError(Exception):
    """Base class for all recoverable, agent-reportable failures."""

    def describe(self) -> str:
        """Human-readable message placed in the error ToolResult."""
        return str(self) or self.__class__.__name__


class ConfigurationError(ToolError):
    """Invalid startup configuration (bad URL, unparseable header JSON). Fatal."""


class ValidationError(ToolError):
    """
    Tool arguments violate the declared input contract.

    Attributes:
        field: Offending argument name (None for whole-input problems)
        constraint: Violated constraint, e.g. "must be <= 100"
    """

    def __init__(self, message: str, field: str | None = None, constraint: str | None = None):
        super().__init__(message)
        self.field = field
        self.constraint = constraint

    def describe(self) -> str:
        return f"Invalid arguments: {self}"


class MutationDisabledError(ToolError):
    """A mutation was requested while ALLOW_MUTATIONS is false."""

    def __init__(self, operation: str | None = None):
        target = f" ({operation})" if operation else ""
        super().__init__(
            f"Mutations are disabled{target}. Mutations are not allowed unless you enable "
            "them in the configuration (ALLOW_MUTATIONS=true). Please use a query operation instead."
        )


class TransportError(ToolError):
    """
    Network failure or non-success HTTP status.

    Attributes:
        status: HTTP status code when the server answered
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status

    def describe(self) -> str:
        if self.status is not None:
            return f"GraphQL request failed (HTTP {self.status}): {self}"
        return f"GraphQL request failed: {self}"


class RemoteGraphQLError(ToolError):
    """
    The endpoint answered with a GraphQL envelope carrying errors.

    The error list is surfaced verbatim so the agent can fix its query.
    """

    def __init__(self, errors: list[dict[str, Any]], data: Any = None):
        super().__init__(f"{len(errors)} GraphQL error(s)")
        self.errors = errors
        self.data = data

    def describe(self) -> str:
        return (
            "The GraphQL response has errors, please fix the query: "
            + json.dumps({"errors": self.errors, "data": self.data}, indent=2, default=str)
        )


class SchemaResolutionError(ToolError):
    """All paths to obtain the schema text failed."""

    def describe(self) -> str:
        return f"Failed to introspect schema: {self}"


class ResponseShapeError(ToolError):
    """Remote payload does not match the template's response contract."""

    def describe(self) -> str:
        return f"Unexpected response shape: {self}"
