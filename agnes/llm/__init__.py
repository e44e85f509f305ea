"""LLM task orchestration: registries, context, providers and the service."""

from agnes.llm.errors import (
    LlmError,
    ProviderError,
    ResponseFormatError,
    UnknownPromptError,
    UnknownSkillError,
)
from agnes.llm.factory import (
    create_action_parsing_service,
    create_appointment_service,
    create_family_summary_service,
    create_llm_service,
    create_todo_extraction_service,
)
from agnes.llm.service import LlmService, LlmServiceDependencies
from agnes.llm.types import (
    LlmMessage,
    LlmProvider,
    LlmRequest,
    LlmResponse,
    LlmUsage,
    TaskResult,
    ToolDefinition,
    ToolResult,
)

__all__ = [
    "LlmError",
    "LlmMessage",
    "LlmProvider",
    "LlmRequest",
    "LlmResponse",
    "LlmService",
    "LlmServiceDependencies",
    "LlmUsage",
    "ProviderError",
    "ResponseFormatError",
    "TaskResult",
    "ToolDefinition",
    "ToolResult",
    "UnknownPromptError",
    "UnknownSkillError",
    "create_action_parsing_service",
    "create_appointment_service",
    "create_family_summary_service",
    "create_llm_service",
    "create_todo_extraction_service",
]
