"""Prompt for structuring appointment booking requests."""

from collections.abc import Mapping

from agnes.llm.prompts.registry import PromptTemplate


def _render(params: Mapping[str, str]) -> str:
    return "\n".join([
        "You are an assistant that extracts appointment booking requests.",
        "Return JSON only. Identify the provider, service, time preferences, and constraints.",
        "Support any provider category (e.g., doctors, salons, housekeeping, contractors).",
        "Include integration hints (booking URL, provider IDs, contact channels) when present.",
        "If details are missing, list what clarifications are needed.",
        "Context:",
        params["context"] or "(none)",
        "Timezone:",
        params["timezone"] or "(unknown)",
        "Locale:",
        params["locale"] or "(unknown)",
        "User message:",
        params["userMessage"],
    ])


appointment_scheduling_prompt = PromptTemplate(
    id="appointment_scheduling",
    description=(
        "Normalize appointment booking requests into structured JSON for generic providers."
    ),
    renderer=_render,
)
