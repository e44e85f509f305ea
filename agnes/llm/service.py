"""LLM task orchestration: skill -> prompt -> context -> provider."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass

from agnes.llm.context.retriever import ContextRetriever
from agnes.llm.context.store import ContextStore
from agnes.llm.errors import UnknownPromptError, UnknownSkillError
from agnes.llm.prompts.registry import PromptRegistry
from agnes.llm.skills.registry import SkillRegistry
from agnes.llm.tools.registry import ToolRegistry
from agnes.llm.types import LlmMessage, LlmProvider, LlmRequest, TaskResult

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_SCOPE = "global"
CONTEXT_MAX_RESULTS = 5
CONTEXT_MAX_TOKENS = 600


@dataclass
class LlmServiceDependencies:
    provider: LlmProvider
    prompts: PromptRegistry
    skills: SkillRegistry
    tools: ToolRegistry
    context_store: ContextStore
    retriever: ContextRetriever


class LlmService:
    """Runs registered skills against a provider.

    All collaborators are injected; registries must not change once the
    service is handling tasks.
    """

    def __init__(self, deps: LlmServiceDependencies) -> None:
        self._deps = deps

    @property
    def provider(self) -> LlmProvider:
        return self._deps.provider

    @property
    def context_store(self) -> ContextStore:
        return self._deps.context_store

    async def run_task(
        self,
        skill_name: str,
        input: Mapping[str, str],
        *,
        context_query: str | None = None,
        context_scope: str | None = None,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> TaskResult:
        """Execute one skill and return the raw provider response.

        Raises:
            UnknownSkillError: ``skill_name`` is not registered.
            UnknownPromptError: the skill's prompt is not registered.
            Exception: whatever the provider raised; there is no retry here.
        """
        skill = self._deps.skills.get(skill_name)
        if skill is None:
            raise UnknownSkillError(skill_name)

        prompt = self._deps.prompts.get(skill.prompt_id)
        if prompt is None:
            raise UnknownPromptError(skill.prompt_id)

        tools = []
        for name in skill.tool_names:
            tool = self._deps.tools.get(name)
            if tool is None:
                logger.debug("Skill '%s' references unregistered tool '%s'", skill.name, name)
                continue
            tools.append(tool)

        context_results = []
        if context_query:
            context_results = await self._deps.retriever.retrieve(
                scope=context_scope or DEFAULT_CONTEXT_SCOPE,
                query=context_query,
                max_tokens=CONTEXT_MAX_TOKENS,
                max_results=CONTEXT_MAX_RESULTS,
            )
        context_text = "\n".join(f"- {result.excerpt}" for result in context_results)

        system_prompt = prompt.render({**input, "context": context_text})
        request = LlmRequest(
            messages=[
                LlmMessage(role="system", content=system_prompt),
                LlmMessage(role="user", content=input.get("userMessage") or ""),
            ],
            tools=[tool.definition for tool in tools],
            response_schema=skill.response_schema,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        provider_name = self._deps.provider.name
        logger.info(
            "LLM task '%s' started (provider=%s, tools=%d, context_hits=%d)",
            skill.name,
            provider_name,
            len(tools),
            len(context_results),
        )
        t0 = time.monotonic()
        try:
            response = await self._deps.provider.generate(request)
        except Exception:
            logger.exception(
                "LLM task '%s' failed in %.2fs (provider=%s)",
                skill.name,
                time.monotonic() - t0,
                provider_name,
            )
            raise

        usage = response.usage
        logger.info(
            "LLM task '%s' completed in %.2fs (provider=%s, input_tokens=%s, output_tokens=%s)",
            skill.name,
            time.monotonic() - t0,
            provider_name,
            usage.input_tokens if usage else None,
            usage.output_tokens if usage else None,
        )

        return TaskResult(
            response=response,
            context_used=[result.document.id for result in context_results],
        )
