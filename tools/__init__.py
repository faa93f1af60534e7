"""Stateless execution tools."""

from tools.base import BaseTool, TemplateTool, ToolContext
from tools.catalog import build_registry
from tools.dispatcher import Dispatcher
from tools.registry import ToolRegistry

__all__ = [
    "BaseTool",
    "Dispatcher",
    "TemplateTool",
    "ToolContext",
    "ToolRegistry",
    "build_registry",
]
