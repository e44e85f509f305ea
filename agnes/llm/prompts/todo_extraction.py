"""Prompt for pulling todo items out of plain text."""

from collections.abc import Mapping

from agnes.llm.prompts.registry import PromptTemplate


def _render(params: Mapping[str, str]) -> str:
    return "\n".join([
        "You are an assistant that extracts actionable todo items from text.",
        "Return a JSON object with a 'todos' array.",
        "Each todo should include: title, snippet, confidence (0-1).",
        "Text:",
        params["sourceText"],
    ])


todo_extraction_prompt = PromptTemplate(
    id="todo_extraction",
    description="Extract todo items from provided text and return JSON.",
    renderer=_render,
)
