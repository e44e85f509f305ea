"""Tests for wrapping MCP client tools as registry tools."""

from dataclasses import dataclass, field
from typing import Any

from agnes.llm.tools import ToolRegistry, load_mcp_tools


@dataclass
class FakeMcpTool:
    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def call(self, arguments: dict[str, Any]) -> str:
        self.calls.append(arguments)
        return f"called {self.name} with {sorted(arguments)}"


class FakeMcpClient:
    def __init__(self, tools: list[FakeMcpTool]) -> None:
        self._tools = tools

    async def list_tools(self) -> list[FakeMcpTool]:
        return self._tools


async def test_load_mcp_tools_wraps_definitions() -> None:
    mcp_tool = FakeMcpTool("weather", "Get weather", {"type": "object"})
    tools = await load_mcp_tools(FakeMcpClient([mcp_tool]))

    assert len(tools) == 1
    assert tools[0].definition.name == "weather"
    assert tools[0].definition.input_schema == {"type": "object"}


async def test_wrapped_tool_forwards_input() -> None:
    mcp_tool = FakeMcpTool("weather", "Get weather")
    reg = ToolRegistry()
    for tool in await load_mcp_tools(FakeMcpClient([mcp_tool])):
        reg.register(tool)

    result = await reg.execute("weather", {"city": "Oslo"})
    assert not result.is_error
    assert result.content == "called weather with ['city']"
    assert mcp_tool.calls == [{"city": "Oslo"}]
