"""Tool registry: catalog of callable helpers a generation may reference."""

from __future__ import annotations

import inspect
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from agnes.llm.tools.base import BaseTool, ToolParams, error_result
from agnes.llm.types import ToolDefinition, ToolResult

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

_EMPTY_SCHEMA: dict[str, Any] = {"type": "object", "properties": {}}


@dataclass
class Tool:
    """A registered tool: its definition plus the async handler behind it."""

    definition: ToolDefinition
    handler: Callable[..., Awaitable[ToolResult]]
    params_model: type[ToolParams] | None = None

    @property
    def name(self) -> str:
        return self.definition.name

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """Run the handler with the given input.

        Validates arguments against the params_model if one is defined.
        Validation errors and handler exceptions come back as
        ``is_error`` results; nothing is raised to the caller.
        """
        logger.info("Tool '%s' called with %s", self.name, arguments)
        t0 = time.monotonic()

        try:
            if self.params_model is not None:
                kwargs = self.params_model(**arguments).model_dump()
            else:
                kwargs = dict(arguments)

            result = await self.handler(**kwargs)
            elapsed = time.monotonic() - t0
            if result.is_error:
                logger.warning(
                    "Tool '%s' returned error in %.2fs: %s", self.name, elapsed, result.content
                )
            else:
                logger.info("Tool '%s' succeeded in %.2fs", self.name, elapsed)
            return result
        except Exception:
            elapsed = time.monotonic() - t0
            logger.exception("Tool '%s' failed in %.2fs", self.name, elapsed)
            return error_result(self.name, f"Tool '{self.name}' failed. Check logs for details.")


class ToolRegistry:
    """Catalog of tools, keyed by name.

    Supports two registration styles:

    1. Decorator (for simple stateless tools)::

        @registry.tool(name="my_tool", description="Does a thing")
        async def my_tool() -> ToolResult:
            return json_result("my_tool", {"ok": True})

    2. Instances (class-based tools or prebuilt ``Tool`` objects)::

        registry.register(MyTool())
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def tool(
        self,
        *,
        name: str,
        description: str,
        params_model: type[ToolParams] | None = None,
    ) -> Callable:
        """Decorator to register an async function as a tool."""

        def decorator(fn: Callable[..., Awaitable[ToolResult]]) -> Callable:
            if not inspect.iscoroutinefunction(fn):
                msg = f"Tool handler '{name}' must be an async function"
                raise TypeError(msg)

            self._tools[name] = Tool(
                definition=ToolDefinition(
                    name=name,
                    description=description,
                    input_schema=_input_schema(params_model),
                ),
                handler=fn,
                params_model=params_model,
            )
            return fn

        return decorator

    def register(self, tool: Tool | BaseTool) -> None:
        """Register a ``Tool`` or a class-based tool instance."""
        if isinstance(tool, BaseTool):
            schema = tool.input_schema or _input_schema(tool.params_model)
            tool = Tool(
                definition=ToolDefinition(
                    name=tool.name, description=tool.description, input_schema=schema
                ),
                handler=tool.execute,
                params_model=tool.params_model,
            )
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool | None:
        """Look up a tool by name."""
        return self._tools.get(name)

    def list(self) -> list[Tool]:
        """All registered tools in registration order."""
        return list(self._tools.values())

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def definitions(self) -> list[ToolDefinition]:
        return [t.definition for t in self._tools.values()]

    async def execute(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Execute a tool by name; unknown names produce an error result."""
        tool = self._tools.get(name)
        if tool is None:
            return error_result(name, f"Unknown tool: {name}")
        return await tool.execute(arguments)


def _input_schema(params_model: type[ToolParams] | None) -> dict[str, Any]:
    if params_model is None:
        return dict(_EMPTY_SCHEMA)
    return params_model.model_json_schema()
