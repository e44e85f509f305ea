"""Skill descriptors and their registry."""

from agnes.llm.skills.actionable_extraction import actionable_extraction_skill
from agnes.llm.skills.appointment_scheduling import appointment_scheduling_skill
from agnes.llm.skills.family_summary import family_summary_skill
from agnes.llm.skills.registry import Skill, SkillRegistry
from agnes.llm.skills.todo_extraction import todo_extraction_skill

__all__ = [
    "Skill",
    "SkillRegistry",
    "actionable_extraction_skill",
    "appointment_scheduling_skill",
    "family_summary_skill",
    "todo_extraction_skill",
]
