"""MCP server setup.

Exposes the registry over the MCP low-level server: tool listing, tool
calls routed through the dispatcher, and the GraphQL schema as a resource.
"""

import logging
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents

from config.settings import Settings
from domain.errors import SchemaResolutionError
from domain.results import ToolResult
from mcp_server import __version__
from services.schema_resolver import SchemaResolver
from tools.dispatcher import Dispatcher
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)

SCHEMA_RESOURCE_NAME = "graphql-schema"


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """Convert a ToolResult into the MCP wire type."""
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def to_mcp_tools(registry: ToolRegistry) -> list[types.Tool]:
    return [
        types.Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["inputSchema"],
        )
        for definition in registry.get_mcp_definitions()
    ]


def create_mcp_server(
    settings: Settings,
    registry: ToolRegistry,
    dispatcher: Dispatcher,
    resolver: SchemaResolver,
) -> Server:
    """
    Create MCP server exposing all registered tools.

    Args:
        settings: Server name and endpoint (the schema resource URI)
        registry: Tool registry with tools to expose
        dispatcher: Executes tool calls and never raises
        resolver: Provides SDL text for the schema resource

    Returns:
        Low-level MCP server, ready to run over any transport

    Implementation Notes:
        - Input validation is left to the dispatcher so mutation gating is
          checked before argument validation
        - Every call returns a CallToolResult carrying isError
    """
    server = Server(settings.name, version=__version__)
    tools = to_mcp_tools(registry)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tools

    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        logger.debug("call_tool %s", name)
        result = await dispatcher.invoke(name, arguments or {})
        return to_call_tool_result(result)

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [
            types.Resource(
                uri=settings.endpoint_url,
                name=SCHEMA_RESOURCE_NAME,
                description=f"GraphQL schema of {settings.endpoint_url}",
                mimeType="text/plain",
            )
        ]

    @server.read_resource()
    async def read_resource(uri) -> list[ReadResourceContents]:
        if str(uri) != settings.endpoint_url:
            raise ValueError(f"Unknown resource: {uri}")
        try:
            sdl = await resolver.resolve()
        except SchemaResolutionError as e:
            raise RuntimeError(f"Failed to get GraphQL schema: {e.describe()}") from e
        return [ReadResourceContents(content=sdl, mime_type="text/plain")]

    return server
