"""Raw GraphQL execution tool."""

import json
import logging
from typing import Any

from graphql import GraphQLError, OperationDefinitionNode, OperationType, parse
from pydantic import Field

from domain.errors import MutationDisabledError, ValidationError
from domain.query import GraphQLQuery
from tools.base import BaseTool, ToolArgs, ToolContext

logger = logging.getLogger(__name__)


class QueryGraphQLArgs(ToolArgs):
    query: str = Field(description="GraphQL document to execute")
    variables: str | None = Field(default=None, description="Variables as a JSON object string")


def parse_variables(raw: str | None) -> dict[str, Any]:
    """
    Decode the variables argument.

    Raises:
        ValidationError: If the text is not JSON or not a JSON object
    """
    if raw is None or not raw.strip():
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"variables must be a JSON object string: {e.msg}", field="variables") from e
    if not isinstance(value, dict):
        raise ValidationError("variables must be a JSON object string", field="variables", constraint="object")
    return value


class QueryGraphQLTool(BaseTool):
    """
    Execute an agent-written GraphQL document against the endpoint.

    Implementation Notes:
        - The document is parsed locally first; syntax errors never reach
          the network
        - Any mutation operation is refused unless mutations are enabled
        - Success returns the whole {"data": ...} envelope
    """

    args_model = QueryGraphQLArgs

    @property
    def name(self) -> str:
        return "query-graphql"

    @property
    def description(self) -> str:
        return "Query a GraphQL endpoint with the given query and variables"

    async def execute(self, args: QueryGraphQLArgs, context: ToolContext) -> Any:
        try:
            document = parse(args.query)
        except GraphQLError as e:
            raise ValidationError(f"Invalid GraphQL query: {e.message}", field="query", constraint="graphql") from e

        operations = [d for d in document.definitions if isinstance(d, OperationDefinitionNode)]
        mutation = next((op for op in operations if op.operation == OperationType.MUTATION), None)
        if mutation is not None and not context.allow_mutations:
            raise MutationDisabledError(mutation.name.value if mutation.name else None)

        request = GraphQLQuery(query=args.query, variables=parse_variables(args.variables))
        logger.debug("query-graphql: %d operation(s)", len(operations))
        data = await context.graphql.execute(request)
        return {"data": data}
