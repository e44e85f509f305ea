"""Base types for the tool-calling framework."""

import json
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from agnes.llm.types import ToolResult


class ToolParams(BaseModel):
    """Base class for tool parameter models.

    Subclass with Field() definitions. The JSON schema is auto-generated
    via model_json_schema() for the tool definition sent to the provider.
    """


def json_result(tool_name: str, data: dict[str, Any]) -> ToolResult:
    """Build a successful result carrying JSON content."""
    return ToolResult(tool_name=tool_name, content=json.dumps(data))


def error_result(tool_name: str, message: str) -> ToolResult:
    """Build a failed result; the error travels as JSON content."""
    return ToolResult(
        tool_name=tool_name,
        content=json.dumps({"error": message}),
        is_error=True,
    )


class BaseTool(ABC):
    """Abstract base for class-based tool implementations.

    Use this when a tool needs initialization state (API clients, MCP
    sessions, etc.). For simple stateless tools, prefer the
    @registry.tool() decorator instead.

    Example::

        class MyTool(BaseTool):
            name = "my_tool"
            description = "Does a thing"
            params_model = MyToolParams

            async def execute(self, **kwargs) -> ToolResult:
                return json_result(self.name, {"ok": True})
    """

    name: str = ""
    description: str = ""
    params_model: type[ToolParams] | None = None
    input_schema: dict[str, Any] | None = None

    @abstractmethod
    async def execute(self, **kwargs: Any) -> ToolResult:
        """Execute the tool with validated parameters."""
        ...
