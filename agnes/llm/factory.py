"""Builders that wire an ``LlmService`` for a particular job."""

from __future__ import annotations

from collections.abc import Iterable

from agnes.llm.context.retriever import ContextStoreRetriever
from agnes.llm.context.store import ContextStore, InMemoryContextStore
from agnes.llm.prompts import (
    PromptRegistry,
    PromptTemplate,
    actionable_extraction_prompt,
    appointment_scheduling_prompt,
    family_summary_prompt,
    todo_extraction_prompt,
)
from agnes.llm.service import LlmService, LlmServiceDependencies
from agnes.llm.skills import (
    Skill,
    SkillRegistry,
    actionable_extraction_skill,
    appointment_scheduling_skill,
    family_summary_skill,
    todo_extraction_skill,
)
from agnes.llm.tools import Tool, ToolRegistry, register_extract_todos
from agnes.llm.types import LlmProvider


def create_llm_service(
    provider: LlmProvider,
    *,
    prompts: Iterable[PromptTemplate] = (),
    skills: Iterable[Skill] = (),
    tools: Iterable[Tool] = (),
    context_store: ContextStore | None = None,
) -> LlmService:
    """Register the given prompts, skills and tools and return a service."""
    prompt_registry = PromptRegistry()
    for prompt in prompts:
        prompt_registry.register(prompt)

    skill_registry = SkillRegistry()
    for skill in skills:
        skill_registry.register(skill)

    tool_registry = ToolRegistry()
    for tool in tools:
        tool_registry.register(tool)

    store = context_store if context_store is not None else InMemoryContextStore()
    return LlmService(
        LlmServiceDependencies(
            provider=provider,
            prompts=prompt_registry,
            skills=skill_registry,
            tools=tool_registry,
            context_store=store,
            retriever=ContextStoreRetriever(store),
        )
    )


def create_action_parsing_service(
    provider: LlmProvider, *, context_store: ContextStore | None = None
) -> LlmService:
    return create_llm_service(
        provider,
        prompts=[actionable_extraction_prompt],
        skills=[actionable_extraction_skill],
        context_store=context_store,
    )


def create_todo_extraction_service(provider: LlmProvider) -> LlmService:
    tools = ToolRegistry()
    register_extract_todos(tools)
    return create_llm_service(
        provider,
        prompts=[todo_extraction_prompt],
        skills=[todo_extraction_skill],
        tools=tools.list(),
    )


def create_appointment_service(
    provider: LlmProvider, *, context_store: ContextStore | None = None
) -> LlmService:
    return create_llm_service(
        provider,
        prompts=[appointment_scheduling_prompt],
        skills=[appointment_scheduling_skill],
        context_store=context_store,
    )


def create_family_summary_service(provider: LlmProvider) -> LlmService:
    return create_llm_service(
        provider,
        prompts=[family_summary_prompt],
        skills=[family_summary_skill],
    )
