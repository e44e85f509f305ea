"""Prompt templates and their registry."""

from agnes.llm.prompts.actionable_extraction import actionable_extraction_prompt
from agnes.llm.prompts.appointment_scheduling import appointment_scheduling_prompt
from agnes.llm.prompts.family_summary import family_summary_prompt
from agnes.llm.prompts.registry import PromptRegistry, PromptTemplate
from agnes.llm.prompts.todo_extraction import todo_extraction_prompt

__all__ = [
    "PromptRegistry",
    "PromptTemplate",
    "actionable_extraction_prompt",
    "appointment_scheduling_prompt",
    "family_summary_prompt",
    "todo_extraction_prompt",
]
