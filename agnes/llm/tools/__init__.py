"""Tool framework: registry, base types and built-in tools."""

from agnes.llm.tools.base import BaseTool, ToolParams, error_result, json_result
from agnes.llm.tools.extract_todos import register_extract_todos
from agnes.llm.tools.mcp import load_mcp_tools
from agnes.llm.tools.registry import Tool, ToolRegistry

__all__ = [
    "BaseTool",
    "Tool",
    "ToolParams",
    "ToolRegistry",
    "error_result",
    "json_result",
    "load_mcp_tools",
    "register_extract_todos",
]
