"""Core types shared by the LLM task pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol, runtime_checkable

LlmRole = Literal["system", "user", "assistant", "tool"]


@dataclass
class LlmMessage:
    """A single role-tagged message in a generation request."""

    role: LlmRole
    content: str
    tool_name: str | None = None
    tool_call_id: str | None = None


@dataclass(frozen=True)
class ToolDefinition:
    """What a generation request is told about a callable tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolResult:
    """Result of a tool execution.

    Failures are reported with ``is_error=True`` rather than raised, so a
    broken tool never aborts the task that exposed it.
    """

    tool_name: str
    content: str
    is_error: bool = False


@dataclass
class LlmUsage:
    input_tokens: int | None = None
    output_tokens: int | None = None
    total_tokens: int | None = None


@dataclass
class LlmRequest:
    messages: list[LlmMessage]
    tools: list[ToolDefinition] = field(default_factory=list)
    temperature: float | None = None
    max_tokens: int | None = None
    response_schema: dict[str, Any] | None = None


@dataclass
class LlmResponse:
    message: LlmMessage
    usage: LlmUsage | None = None


@runtime_checkable
class LlmProvider(Protocol):
    """Protocol that every generative backend must satisfy."""

    @property
    def name(self) -> str:
        """Short provider identifier (e.g. 'gemini', 'null')."""
        ...

    async def generate(self, request: LlmRequest) -> LlmResponse:
        """Run one generation. Failures must raise, never return empty text."""
        ...


@dataclass
class TaskResult:
    """Raw provider response plus the ids of the context documents injected."""

    response: LlmResponse
    context_used: list[str] = field(default_factory=list)
