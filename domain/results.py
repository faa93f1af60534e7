"""Tool result type returned to the calling agent."""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """Single text block of a tool result."""
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """
    Standardized tool output format.

    The unit returned to the calling agent through MCP.

    Fields:
        content: Ordered text blocks
            Example: [{"type": "text", "text": "{\\n  \\"bookings\\": [...]\\n}"}]

        is_error: Recoverable, descriptive failure (serialized as "isError")
            True = the agent should read content[0].text and adapt
            False = content holds the shaped result

    Example:
        ToolResult.from_payload({"available": False, "totalConflicts": 1})

        ToolResult.error("Mutations are disabled. ...")

    Implementation Notes:
        - Error results always carry a non-empty first text block
        - Payloads that are already strings (SDL text) are passed through
        - Everything else is rendered as indented JSON
    """
    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_payload(cls, payload: Any) -> "ToolResult":
        """Wrap a successful tool payload."""
        if isinstance(payload, str):
            text = payload
        else:
            text = json.dumps(payload, indent=2, default=str)
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        """Wrap a failure message."""
        return cls(content=[TextContent(text=message or "Tool failed without a message")], is_error=True)

    @property
    def text(self) -> str:
        """First text block (convenience for callers and tests)."""
        return self.content[0].text if self.content else ""
