"""Base tool interface and execution context.

All tools inherit from BaseTool. Tools are stateless: everything they need
per call (GraphQL service, schema resolver, mutation flag, clock) arrives
through ToolContext.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from domain.errors import ValidationError
from domain.query import GraphQLQuery, QueryTemplate
from services.graphql_service import GraphQLService
from services.schema_resolver import SchemaResolver


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ToolContext(BaseModel):
    """
    Per-process bundle handed to every tool execution.

    Fields:
        graphql: Service that sends requests to the configured endpoint
        resolver: Schema source resolver (SDL text for schema tools)
        allow_mutations: Whether mutation tools and mutation documents may run
        clock: Returns the current instant; read at call time, never cached

    Example:
        context = ToolContext(graphql=service, resolver=resolver, allow_mutations=False)
        request = tool.translate(args, context.now())
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    graphql: GraphQLService
    resolver: SchemaResolver
    allow_mutations: bool = False
    clock: Callable[[], datetime] = Field(default=utc_now)

    def now(self) -> datetime:
        return self.clock()


class ToolArgs(BaseModel):
    """Arguments of a tool with snake_case names."""
    model_config = ConfigDict(extra="ignore")


class CamelArgs(BaseModel):
    """Arguments published to agents in camelCase (startDate, resourceId...)."""
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class NoArgs(ToolArgs):
    pass


def _format_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


class BaseTool(ABC):
    """
    Base interface for all tools.

    Tool Categories:
        1. Generic tools: work against any GraphQL endpoint
           (query-graphql, introspect-schema, search-schema, ...)
        2. Business tools: one fixed template each, with translate/shape
           steps (TemplateTool subclasses)

    Attributes:
        args_model: Pydantic model describing the tool arguments; its JSON
            schema is published as the MCP input schema

    Implementation Pattern:
        class MyTool(BaseTool):
            args_model = MyArgs

            @property
            def name(self) -> str:
                return "my_tool"

            @property
            def description(self) -> str:
                return "Does something useful"

            async def execute(self, args: MyArgs, context: ToolContext) -> Any:
                return {"answer": 42}

    MCP Exposure:
        - name, description, input_schema used for MCP tool definitions
        - Dispatcher validates arguments, then awaits execute()
        - The returned payload is serialized into a ToolResult
    """

    args_model: ClassVar[type[BaseModel]] = NoArgs

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier, e.g. "optix_list_bookings"."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description shown to the LLM for tool selection."""

    @property
    def mutation(self) -> bool:
        """
        Whether the tool changes remote state.

        Implementation Notes:
            - Mutation tools are always registered
            - The dispatcher refuses them while mutations are disabled,
              before any argument validation or network call
        """
        return False

    def input_schema(self) -> dict:
        """JSON schema for tool inputs (MCP compatible)."""
        schema = self.args_model.model_json_schema()
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def validate_inputs(self, raw: dict[str, Any] | None) -> BaseModel:
        """
        Validate raw arguments against args_model.

        Raises:
            ValidationError: Naming each offending field and its constraint
                Example: "limit: Input should be less than or equal to 100"
        """
        try:
            return self.args_model.model_validate(raw or {})
        except PydanticValidationError as e:
            errors = e.errors()
            first = errors[0] if errors else {}
            loc = first.get("loc") or ()
            raise ValidationError(
                "; ".join(_format_error(err) for err in errors),
                field=str(loc[0]) if loc else None,
                constraint=first.get("type"),
            ) from e

    @abstractmethod
    async def execute(self, args: BaseModel, context: ToolContext) -> Any:
        """
        Run the tool with validated arguments.

        Returns:
            Payload for the agent: a str is passed through as text, anything
            else is rendered as JSON

        Raises:
            ToolError subclasses; the dispatcher converts them to results
        """

    def to_mcp_definition(self) -> dict:
        """
        Convert tool to MCP definition format.

        Example:
            {
                "name": "optix_list_bookings",
                "description": "List bookings with optional filters...",
                "inputSchema": {"type": "object", "properties": {...}}
            }
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class TemplateTool(BaseTool):
    """
    Tool bound to exactly one query template.

    Execution is translate -> send -> shape:
        - translate(args, now) builds the GraphQL request (no I/O)
        - the context's GraphQL service sends it
        - shape(data, request) turns the `data` object into the agent payload

    Subclasses set `name`, `description`, `args_model` and `template` as
    class attributes.
    """

    template: ClassVar[QueryTemplate]

    @property
    def mutation(self) -> bool:
        return self.template.is_mutation

    @abstractmethod
    def translate(self, args: BaseModel, now: datetime) -> GraphQLQuery:
        """Convert validated arguments into template variables."""

    def shape(self, data: dict[str, Any], request: GraphQLQuery) -> Any:
        """Default shaping returns the `data` object untouched."""
        return data

    async def execute(self, args: BaseModel, context: ToolContext) -> Any:
        request = self.translate(args, context.now())
        data = await context.graphql.execute(request)
        return self.shape(data, request)
