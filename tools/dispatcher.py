"""Dispatcher: the single boundary between tool calls and ToolResults."""

import logging
import time
from typing import Any

from domain.errors import MutationDisabledError, ToolError
from domain.results import ToolResult
from tools.base import ToolContext
from tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Routes a named invocation to its tool and converts every outcome into a
    ToolResult.

    Flow:
        1. Unknown name -> error result
        2. Mutation tool while mutations are disabled -> error result,
           before validation and without any network call
        3. Validate arguments (ValidationError -> error result)
        4. Execute (translate, send, shape)
        5. ToolError -> its own message; anything else is logged with its
           traceback and reported as an internal error

    Example:
        dispatcher = Dispatcher(registry, context)
        result = await dispatcher.invoke("optix_list_bookings", {"limit": 5})
        if result.is_error:
            print(result.text)

    Implementation Notes:
        - invoke() never raises
        - Nothing is retried
    """

    def __init__(self, registry: ToolRegistry, context: ToolContext):
        self.registry = registry
        self.context = context

    async def invoke(self, name: str, raw_args: dict[str, Any] | None = None) -> ToolResult:
        tool = self.registry.get(name)
        if tool is None:
            return ToolResult.error(f"Unsupported tool: {name}")

        started = time.perf_counter()
        try:
            if tool.mutation and not self.context.allow_mutations:
                raise MutationDisabledError(name)
            args = tool.validate_inputs(raw_args)
            payload = await tool.execute(args, self.context)
        except ToolError as e:
            logger.info("Tool %s failed: %s", name, e.__class__.__name__)
            return ToolResult.error(e.describe())
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return ToolResult.error(f"Internal error in tool {name}: {e.__class__.__name__}: {e}")

        logger.debug("Tool %s succeeded in %.1fms", name, (time.perf_counter() - started) * 1000)
        return ToolResult.from_payload(payload)
