"""Skill registry: declarative task descriptors keyed by name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Skill:
    """A named task contract.

    Calling a skill renders ``prompt_id``, exposes ``tool_names`` to the
    provider and, when ``response_schema`` is set, asks for JSON shaped by
    it. Cross-references are resolved at task time, not here.
    """

    name: str
    description: str
    prompt_id: str
    tool_names: tuple[str, ...] = ()
    response_schema: dict[str, Any] | None = None


class SkillRegistry:
    """Central catalog of skills. Populate at startup, read-only afterwards."""

    def __init__(self) -> None:
        self._skills: dict[str, Skill] = {}

    def register(self, skill: Skill) -> None:
        self._skills[skill.name] = skill

    def get(self, name: str) -> Skill | None:
        return self._skills.get(name)

    def list(self) -> list[Skill]:
        return list(self._skills.values())
