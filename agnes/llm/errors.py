"""Error taxonomy for LLM task execution."""

from __future__ import annotations


class LlmError(Exception):
    """Base class for all LLM pipeline errors."""


class UnknownSkillError(LlmError):
    """A task named a skill that is not registered."""

    def __init__(self, skill_name: str) -> None:
        super().__init__(f"Unknown skill: {skill_name}")
        self.skill_name = skill_name


class UnknownPromptError(LlmError):
    """A skill references a prompt id that is not registered."""

    def __init__(self, prompt_id: str) -> None:
        super().__init__(f"Unknown prompt: {prompt_id}")
        self.prompt_id = prompt_id


class ProviderError(LlmError):
    """The generative backend failed (transport error, timeout or non-2xx)."""

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ResponseFormatError(LlmError):
    """The model output could not be parsed as JSON."""

    def __init__(self, message: str = "LLM response was not valid JSON.") -> None:
        super().__init__(message)
