"""Bridge tools exposed by an MCP-style client into the tool registry."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from agnes.llm.tools.registry import Tool
from agnes.llm.types import ToolDefinition, ToolResult

logger = logging.getLogger(__name__)


class McpTool(Protocol):
    name: str
    description: str
    input_schema: dict[str, Any]

    async def call(self, arguments: dict[str, Any]) -> str: ...


class McpClient(Protocol):
    async def list_tools(self) -> list[McpTool]: ...


def _wrap(mcp_tool: McpTool) -> Tool:
    async def handler(**kwargs: Any) -> ToolResult:
        content = await mcp_tool.call(kwargs)
        return ToolResult(tool_name=mcp_tool.name, content=content)

    return Tool(
        definition=ToolDefinition(
            name=mcp_tool.name,
            description=mcp_tool.description,
            input_schema=dict(mcp_tool.input_schema or {}),
        ),
        handler=handler,
    )


async def load_mcp_tools(client: McpClient) -> list[Tool]:
    """List the client's tools and wrap each one as a registry ``Tool``."""
    tools = [_wrap(t) for t in await client.list_tools()]
    logger.info("Loaded %d MCP tool(s): %s", len(tools), ", ".join(t.name for t in tools))
    return tools
