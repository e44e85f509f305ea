"""Prompt registry: maps prompt ids to pure rendering functions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class _BlankParams(dict):
    """Parameter mapping where missing or None values read as ''."""

    def __missing__(self, key: str) -> str:
        return ""


@dataclass(frozen=True)
class PromptTemplate:
    """A named prompt whose text is produced by ``renderer``.

    ``render`` never raises on missing parameters: they substitute as the
    empty string. Renderers must not read clocks or random state.
    """

    id: str
    description: str
    renderer: Callable[[Mapping[str, str]], str]

    def render(self, params: Mapping[str, str | None] | None = None) -> str:
        cleaned = _BlankParams(
            (key, "" if value is None else str(value))
            for key, value in (params or {}).items()
        )
        return self.renderer(cleaned)


class PromptRegistry:
    """Central catalog of prompt templates, keyed by id.

    Populate at startup; treat as read-only afterwards.
    """

    def __init__(self) -> None:
        self._prompts: dict[str, PromptTemplate] = {}

    def register(self, prompt: PromptTemplate) -> None:
        if prompt.id in self._prompts:
            logger.debug("Replacing prompt '%s'", prompt.id)
        self._prompts[prompt.id] = prompt

    def get(self, prompt_id: str) -> PromptTemplate | None:
        return self._prompts.get(prompt_id)

    def list(self) -> list[PromptTemplate]:
        return list(self._prompts.values())
