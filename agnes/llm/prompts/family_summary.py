"""Prompt for the short SMS digest sent to families."""

from collections.abc import Mapping

from agnes.llm.prompts.registry import PromptTemplate


def _render(params: Mapping[str, str]) -> str:
    return "\n".join([
        "You are a friendly family assistant.",
        f"Create a short, informal SMS summary for {params['familyName']} "
        f"covering {params['periodLabel']}.",
        "Use emojis at the start of each line item.",
        "Keep it informative, warm, and concise (under 8 lines).",
        "Return plain text only (no markdown, no JSON).",
        "If a section is empty, skip it or briefly mention there's nothing new.",
        "",
        "Calendar events:",
        params["calendarItems"] or "None",
        "",
        "Todos:",
        params["todoItems"] or "None",
        "",
        "Meals:",
        params["mealItems"] or "None",
        "",
        "Shopping list:",
        params["shoppingItems"] or "None",
    ])


family_summary_prompt = PromptTemplate(
    id="family_summary_sms",
    description="Generate a short, informal SMS summary for a family.",
    renderer=_render,
)
