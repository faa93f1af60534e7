"""Tool registry for MCP exposure.

Central, immutable catalog of the tools this server offers. Built once at
startup; the dispatcher and the MCP adapter only read from it.
"""

from collections.abc import Iterable
from types import MappingProxyType

from tools.base import BaseTool


class ToolRegistry:
    """
    Central registry for all tools.

    Architecture:
        ┌─────────────────────────────────────┐
        │          MCP adapter                │
        │  list_tools / call_tool             │
        └────────────────┬────────────────────┘
                         │
        ┌────────────────▼────────────────────┐
        │        Dispatcher                   │
        │   registry.get(name) -> tool        │
        └────────────────┬────────────────────┘
                         │
        ┌────────────────▼────────────────────┐
        │        ToolRegistry                 │
        │   - Tool storage (read-only map)    │
        │   - Registration order preserved    │
        └─────────────────────────────────────┘

    Example Usage:
        registry = ToolRegistry([QueryGraphQLTool(), ListBookingsTool()])
        registry.list_tools()
        # ["query-graphql", "optix_list_bookings"]

        tool = registry.get("optix_list_bookings")

    Implementation Notes:
        - Duplicate names are rejected at construction (prevents shadowing)
        - There is no register/unregister after construction
        - Which tools to include is decided by the caller (see catalog.py)
    """

    def __init__(self, tools: Iterable[BaseTool] = ()):
        """
        Initialize registry.

        Args:
            tools: Tool instances in the order they should be listed

        Raises:
            ValueError: If two tools share a name
        """
        entries: dict[str, BaseTool] = {}
        for tool in tools:
            if tool.name in entries:
                raise ValueError(f"Tool '{tool.name}' already registered")
            entries[tool.name] = tool
        self._tools = MappingProxyType(entries)

    def get(self, name: str) -> BaseTool | None:
        """Tool registered under name, None when unknown."""
        return self._tools.get(name)

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def list_tools(self) -> list[str]:
        """
        List all registered tool names.

        Returns:
            Names in registration order
            Example: ["query-graphql", "introspect-schema", ...]
        """
        return list(self._tools.keys())

    def tools(self) -> list[BaseTool]:
        """Tool definitions in registration order."""
        return list(self._tools.values())

    def get_mcp_definitions(self) -> list[dict]:
        """
        Generate MCP tool definitions for all tools.

        Returns:
            List of MCP tool definition dicts

        Example:
            [
                {
                    "name": "optix_list_bookings",
                    "description": "List bookings in your Optix workspace...",
                    "inputSchema": {"type": "object", "properties": {...}}
                },
                ...
            ]
        """
        return [tool.to_mcp_definition() for tool in self._tools.values()]

    def get_tool_info(self, tool_name: str) -> dict:
        """
        Get detailed info about a tool.

        Example:
            {
                "name": "optix_cancel_booking",
                "description": "Cancel an existing booking...",
                "mutation": True,
                "input_schema": {...}
            }

        Raises:
            KeyError: If tool not found
        """
        tool = self._tools.get(tool_name)
        if tool is None:
            raise KeyError(f"Tool '{tool_name}' not found in registry")
        return {
            "name": tool.name,
            "description": tool.description,
            "mutation": tool.mutation,
            "input_schema": tool.input_schema(),
        }

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        """String representation for debugging."""
        tools_str = ", ".join(self.list_tools())
        return f"ToolRegistry(tools=[{tools_str}])"
