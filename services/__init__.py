"""Service abstractions for external dependencies."""

from services.graphql_service import GraphQLService
from services.schema_resolver import SchemaResolver

__all__ = [
    "GraphQLService",
    "SchemaResolver",
]
