"""Tests for skill descriptors and the skill registry."""

from agnes.llm.skills import (
    Skill,
    SkillRegistry,
    actionable_extraction_skill,
    appointment_scheduling_skill,
    family_summary_skill,
    todo_extraction_skill,
)


def test_register_get_list() -> None:
    reg = SkillRegistry()
    reg.register(family_summary_skill)
    reg.register(todo_extraction_skill)
    assert reg.get("family_summary_sms") is family_summary_skill
    assert [s.name for s in reg.list()] == ["family_summary_sms", "extract_todos"]


def test_unknown_skill_returns_none() -> None:
    assert SkillRegistry().get("missing") is None


def test_registration_does_not_validate_prompt_reference() -> None:
    reg = SkillRegistry()
    reg.register(Skill(name="orphan", description="", prompt_id="never_registered"))
    assert reg.get("orphan").prompt_id == "never_registered"


def test_actionable_schema_requires_all_collections() -> None:
    schema = actionable_extraction_skill.response_schema
    assert schema["required"] == ["todos", "meals", "events"]
    event_props = schema["properties"]["events"]["items"]["properties"]
    assert set(event_props["start"]["properties"]) == {"dateTime", "timeZone"}


def test_builtin_skill_wiring() -> None:
    assert todo_extraction_skill.tool_names == ("extract_todos_from_text",)
    assert family_summary_skill.response_schema is None
    assert appointment_scheduling_skill.prompt_id == "appointment_scheduling"
