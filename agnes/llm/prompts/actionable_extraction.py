"""Prompt for extracting todos, meals and calendar events from mixed input."""

from collections.abc import Mapping

from agnes.llm.prompts.registry import PromptTemplate


def _render(params: Mapping[str, str]) -> str:
    lines = [
        "You are an assistant that extracts actionable items from user input.",
        "The input may include plain text and attachment data "
        "(images or PDFs encoded as data URLs).",
        "Use the user's locale and timezone when interpreting dates and times.",
        f"Locale: {params['locale'] or 'en-US'}",
        f"Timezone: {params['timezone'] or 'UTC'}",
    ]
    if params["language"]:
        lines.append(f"Write titles and notes in: {params['language']}")
    lines += [
        "Return a JSON object with keys: todos, meals, events.",
        "- todos: array of { title, notes?, recurrence?, confidence, "
        "confidenceReasons?, source? }",
        "- meals: array of { title, notes?, mealType?, scheduledFor?, servings?, "
        "recipeUrl?, confidence, source? }",
        "- events: array of { title, description?, start?, end?, location?, "
        "recurrence?, confidence, confidenceReasons?, source? }",
        "mealType must be one of: breakfast, lunch, dinner, snack.",
        "Only include items that are clearly actionable.",
        "For events, include start and end as { dateTime, timeZone } with an ISO 8601 "
        "dateTime when both are explicit; otherwise omit the end.",
        "For scheduledFor, return an ISO 8601 timestamp if a date/time is explicit.",
        "Confidence must be a number between 0 and 1.",
        "Source should be a short snippet that supports the item.",
    ]
    if params["contextJson"]:
        lines += ["Request context (JSON):", params["contextJson"]]
    if params["context"]:
        lines += ["Known family context:", params["context"]]
    lines += ["Input:", params["sourceText"]]
    return "\n".join(lines)


actionable_extraction_prompt = PromptTemplate(
    id="actionable_extraction",
    description="Extract actionable todos, meals, and calendar events from mixed inputs.",
    renderer=_render,
)
