"""Domain objects: queries, responses, results and errors."""

from domain.errors import (
    ConfigurationError,
    MutationDisabledError,
    RemoteGraphQLError,
    ResponseShapeError,
    SchemaResolutionError,
    ToolError,
    TransportError,
    ValidationError,
)
from domain.query import GraphQLQuery, QueryTemplate
from domain.responses import Page, ResponseEnvelope, unwrap_object, unwrap_page
from domain.results import TextContent, ToolResult

__all__ = [
    "ConfigurationError",
    "GraphQLQuery",
    "MutationDisabledError",
    "Page",
    "QueryTemplate",
    "RemoteGraphQLError",
    "ResponseEnvelope",
    "ResponseShapeError",
    "SchemaResolutionError",
    "TextContent",
    "ToolError",
    "ToolResult",
    "TransportError",
    "ValidationError",
    "unwrap_object",
    "unwrap_page",
]
