"""Skill: extract todo items from text, with a regex helper tool."""

from agnes.llm.skills.registry import Skill

todo_extraction_skill = Skill(
    name="extract_todos",
    description=(
        "Extract todo items from provided text (e.g. PDF text extraction) "
        "and return structured JSON."
    ),
    prompt_id="todo_extraction",
    tool_names=("extract_todos_from_text",),
    response_schema={
        "type": "object",
        "properties": {
            "todos": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": {"type": "string"},
                        "snippet": {"type": "string"},
                        "confidence": {"type": "number"},
                    },
                    "required": ["title", "snippet", "confidence"],
                },
            }
        },
        "required": ["todos"],
    },
)
