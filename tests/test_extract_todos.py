"""Tests for the extract_todos_from_text tool."""

import json

from agnes.llm.tools import ToolRegistry, register_extract_todos
from agnes.llm.tools.extract_todos import TOOL_NAME, find_todos


def test_find_todos_matches_keywords() -> None:
    text = "Notes\nTODO: call the plumber\nrandom line\nFollow up with school about trip"
    todos = find_todos(text)
    assert [t["title"] for t in todos] == ["call the plumber", "with school about trip"]
    assert todos[0]["snippet"] == "TODO: call the plumber"


def test_find_todos_no_matches() -> None:
    assert find_todos("nothing to see here") == []


async def test_registered_tool_returns_json() -> None:
    reg = ToolRegistry()
    tool = register_extract_todos(reg)
    assert tool.name == TOOL_NAME
    assert tool.definition.input_schema["properties"]["text"]["type"] == "string"

    result = await reg.execute(TOOL_NAME, {"text": "Task: renew passport"})
    assert not result.is_error
    assert json.loads(result.content) == {
        "todos": [{"title": "renew passport", "snippet": "Task: renew passport"}]
    }


async def test_missing_text_yields_empty_list() -> None:
    reg = ToolRegistry()
    register_extract_todos(reg)
    result = await reg.execute(TOOL_NAME, {})
    assert json.loads(result.content) == {"todos": []}
