"""Skill: plain-text SMS digest for a family."""

from agnes.llm.skills.registry import Skill

family_summary_skill = Skill(
    name="family_summary_sms",
    description="Create a short SMS summary for a family covering upcoming plans and tasks.",
    prompt_id="family_summary_sms",
)
