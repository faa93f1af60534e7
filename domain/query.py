"""Query domain objects.

Represents GraphQL documents (templates) and the per-call requests built
from them.
"""

from functools import cached_property
from typing import Any, Literal

from graphql import OperationDefinitionNode, parse, print_ast
from pydantic import BaseModel, ConfigDict, Field


OperationKind = Literal["query", "mutation"]


class QueryTemplate(BaseModel):
    """
    Named, parameterized GraphQL document.

    Templates are static content compiled into the module. The document text
    is the single source of truth for which remote fields are requested and
    which variables may be bound.

    Fields:
        name: Logical operation name
            Example: "LIST_BOOKINGS"

        document: GraphQL document text
            Example: '''
                query GetBooking($booking_id: ID!) {
                    booking(booking_id: $booking_id) { booking_id title }
                }
            '''

        description: Short note on what the template fetches

    Example:
        LIST_MEMBERS = QueryTemplate(
            name="LIST_MEMBERS",
            document="query ListMembers($limit: Int = 100) { ... }",
        )
        request = LIST_MEMBERS.bind({"limit": 20, "search": None})
        # request.variables == {"limit": 20}

    Implementation Notes:
        - Operation kind and variable contract are derived by parsing the
          document with graphql-core, never declared twice
        - bind() rejects undeclared variable names (programming error)
        - Exactly one template per logical operation
    """
    model_config = ConfigDict(frozen=True, ignored_types=(cached_property,))

    name: str
    document: str
    description: str = ""

    @cached_property
    def operation_node(self) -> OperationDefinitionNode:
        definitions = [
            d for d in parse(self.document).definitions
            if isinstance(d, OperationDefinitionNode)
        ]
        if len(definitions) != 1:
            raise ValueError(f"Template {self.name} must contain exactly one operation")
        return definitions[0]

    @property
    def kind(self) -> OperationKind:
        """Operation kind ("query" or "mutation")."""
        return self.operation_node.operation.value

    @property
    def is_mutation(self) -> bool:
        return self.kind == "mutation"

    @property
    def operation_name(self) -> str | None:
        node = self.operation_node.name
        return node.value if node else None

    @property
    def variables(self) -> dict[str, str]:
        """
        Declared variable contract.

        Returns:
            Mapping of variable name to GraphQL type
            Example: {"booking_id": "ID!"}
        """
        return {
            v.variable.name.value: print_ast(v.type)
            for v in self.operation_node.variable_definitions or ()
        }

    def required_variables(self) -> set[str]:
        """Variables typed non-null without a default value."""
        return {
            v.variable.name.value
            for v in self.operation_node.variable_definitions or ()
            if print_ast(v.type).endswith("!") and v.default_value is None
        }

    def bind(self, variables: dict[str, Any], **metadata) -> "GraphQLQuery":
        """
        Build a request from this template.

        Args:
            variables: Candidate variables; None values are dropped
            **metadata: Extra context kept on the request for shaping

        Raises:
            ValueError: If a variable is not declared by the template
        """
        declared = self.variables
        unknown = sorted(set(variables) - set(declared))
        if unknown:
            raise ValueError(f"Template {self.name} does not declare variable(s): {', '.join(unknown)}")
        return GraphQLQuery(
            query=self.document,
            variables={k: v for k, v in variables.items() if v is not None},
            operation_name=self.operation_name,
            template=self.name,
            metadata=metadata,
        )


class GraphQLQuery(BaseModel):
    """
    GraphQL request wrapper (the request envelope minus endpoint/headers).

    Built by a tool's translate step, executed by GraphQLService.

    Fields:
        query: GraphQL document text
        variables: Bound variables, exactly as the remote API expects them
            Example: {"resource_id": ["R1"], "start_timestamp": 1759741200}
        operation_name: Operation to run when the document has several
        template: Name of the template this request came from
        metadata: Values the shaping step needs (resolved time window, etc.)
    """
    query: str
    variables: dict[str, Any] = Field(default_factory=dict)
    operation_name: str | None = None
    template: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to the {query, variables} pair shown to agents."""
        return {"query": self.query, "variables": self.variables}

    def get_filter_summary(self) -> list[str]:
        """
        Extract human-readable filter summary from variables.

        Returns:
            List of applied filters
            Example: ["limit:50", "resource_id:['R1']"]
        """
        filters = []
        for key, value in self.variables.items():
            if value is not None:
                filters.append(f"{key}:{value}")
        return filters
