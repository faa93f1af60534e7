"""Generic GraphQL tools, available against any endpoint."""

from tools.generic.generate_query import GenerateQueryTool
from tools.generic.graphql_query import QueryGraphQLTool
from tools.generic.schema_tools import GetEnumValuesTool, IntrospectSchemaTool, SearchSchemaTool


def generic_tools():
    return [
        QueryGraphQLTool(),
        IntrospectSchemaTool(),
        SearchSchemaTool(),
        GetEnumValuesTool(),
        GenerateQueryTool(),
    ]


__all__ = ["generic_tools"]
