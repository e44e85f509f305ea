"""Regex helper that finds todo-like lines in plain text."""

import re

from pydantic import Field

from agnes.llm.tools.base import ToolParams, json_result
from agnes.llm.tools.registry import Tool, ToolRegistry
from agnes.llm.types import ToolResult

TOOL_NAME = "extract_todos_from_text"

_TODO_PATTERN = re.compile(r"(\b(todo|task|action|follow up)\b[:\-]?\s*)([^\n]+)", re.IGNORECASE)


class ExtractTodosParams(ToolParams):
    text: str = Field(default="", description="The text content to parse for todos.")


def find_todos(text: str) -> list[dict[str, str]]:
    """Return ``{title, snippet}`` for every todo/task/action/follow-up line."""
    todos = []
    for match in _TODO_PATTERN.finditer(text):
        snippet = match.group(0).strip()
        title = match.group(3).strip() or snippet
        todos.append({"title": title, "snippet": snippet})
    return todos


async def extract_todos_from_text(text: str = "") -> ToolResult:
    return json_result(TOOL_NAME, {"todos": find_todos(text)})


def register_extract_todos(registry: ToolRegistry) -> Tool:
    registry.tool(
        name=TOOL_NAME,
        description=(
            "Extract todos from provided text (e.g. PDF text extraction). Returns JSON "
            "array of todo items with title and source snippet."
        ),
        params_model=ExtractTodosParams,
    )(extract_todos_from_text)
    return registry.get(TOOL_NAME)
