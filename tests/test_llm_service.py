"""Tests for LlmService.run_task orchestration."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from agnes.llm import (
    LlmService,
    ProviderError,
    UnknownPromptError,
    UnknownSkillError,
    create_llm_service,
)
from agnes.llm.context import ContextDocument, InMemoryContextStore
from agnes.llm.prompts import PromptTemplate
from agnes.llm.skills import Skill
from agnes.llm.tools import ToolRegistry, json_result
from agnes.llm.types import ToolResult

# -- Helpers -----------------------------------------------------------------


echo_prompt = PromptTemplate(
    id="echo",
    description="Echo params",
    renderer=lambda p: f"name={p['name']}\ncontext:\n{p['context']}",
)

SCHEMA = {"type": "object", "properties": {"answer": {"type": "string"}}}


def _tools() -> ToolRegistry:
    reg = ToolRegistry()

    @reg.tool(name="lookup", description="Look something up")
    async def lookup() -> ToolResult:
        return json_result("lookup", {})

    return reg


def _service(
    provider: Any,
    *,
    skill: Skill | None = None,
    store: InMemoryContextStore | None = None,
) -> LlmService:
    skill = skill or Skill(
        name="echo_skill",
        description="Echo",
        prompt_id="echo",
        tool_names=("lookup", "missing_tool"),
        response_schema=SCHEMA,
    )
    return create_llm_service(
        provider,
        prompts=[echo_prompt],
        skills=[skill],
        tools=_tools().list(),
        context_store=store,
    )


# -- Lookup failures ---------------------------------------------------------


async def test_unknown_skill_raises_before_provider(provider: Any) -> None:
    service = _service(provider)
    with pytest.raises(UnknownSkillError, match="Unknown skill: nope"):
        await service.run_task("nope", {})
    assert provider.requests == []


async def test_unknown_prompt_raises_before_provider(provider: Any) -> None:
    skill = Skill(name="orphan", description="No prompt", prompt_id="ghost")
    service = _service(provider, skill=skill)
    with pytest.raises(UnknownPromptError, match="Unknown prompt: ghost"):
        await service.run_task("orphan", {})
    assert provider.requests == []


# -- Request assembly --------------------------------------------------------


async def test_request_carries_prompt_and_user_message(provider: Any) -> None:
    service = _service(provider)
    await service.run_task("echo_skill", {"name": "Ada", "userMessage": "hello"})

    request = provider.requests[0]
    assert [m.role for m in request.messages] == ["system", "user"]
    assert request.messages[0].content == "name=Ada\ncontext:\n"
    assert request.messages[1].content == "hello"


async def test_missing_user_message_is_empty(provider: Any) -> None:
    service = _service(provider)
    await service.run_task("echo_skill", {"name": "Ada"})
    assert provider.requests[0].messages[1].content == ""


async def test_unregistered_tools_are_skipped(provider: Any) -> None:
    service = _service(provider)
    await service.run_task("echo_skill", {})
    assert [t.name for t in provider.requests[0].tools] == ["lookup"]


async def test_schema_and_sampling_options_forwarded(provider: Any) -> None:
    service = _service(provider)
    await service.run_task("echo_skill", {}, max_tokens=321, temperature=0)

    request = provider.requests[0]
    assert request.response_schema == SCHEMA
    assert request.max_tokens == 321
    assert request.temperature == 0


async def test_sampling_options_default_to_none(provider: Any) -> None:
    service = _service(provider)
    await service.run_task("echo_skill", {})
    assert provider.requests[0].max_tokens is None
    assert provider.requests[0].temperature is None


# -- Context retrieval -------------------------------------------------------


async def test_context_rendered_as_bullets(
    provider: Any, store: InMemoryContextStore
) -> None:
    await store.add_documents([
        ContextDocument(scope="global", text="Emma has soccer on Wednesday", id="c1"),
        ContextDocument(scope="global", text="Grocery run on Saturday", id="c2"),
    ])
    service = _service(provider, store=store)

    result = await service.run_task("echo_skill", {"name": "x"}, context_query="soccer")

    assert result.context_used == ["c1"]
    assert provider.requests[0].messages[0].content.endswith(
        "context:\n- Emma has soccer on Wednesday"
    )


async def test_context_scope_is_respected(
    provider: Any, store: InMemoryContextStore
) -> None:
    await store.add_documents([
        ContextDocument(scope="family:1", text="soccer practice", id="f1"),
        ContextDocument(scope="global", text="soccer league signup", id="g1"),
    ])
    service = _service(provider, store=store)

    scoped = await service.run_task(
        "echo_skill", {}, context_query="soccer", context_scope="family:1"
    )
    default = await service.run_task("echo_skill", {}, context_query="soccer")

    assert scoped.context_used == ["f1"]
    assert default.context_used == ["g1"]


async def test_no_context_query_skips_retrieval(provider: Any) -> None:
    service = _service(provider)
    service._deps.retriever = AsyncMock()

    result = await service.run_task("echo_skill", {})

    service._deps.retriever.retrieve.assert_not_awaited()
    assert result.context_used == []


async def test_retriever_called_with_budget(provider: Any) -> None:
    service = _service(provider)
    service._deps.retriever = AsyncMock()
    service._deps.retriever.retrieve.return_value = []

    await service.run_task("echo_skill", {}, context_query="soccer")

    service._deps.retriever.retrieve.assert_awaited_once_with(
        scope="global", query="soccer", max_tokens=600, max_results=5
    )


# -- Results and errors ------------------------------------------------------


async def test_returns_provider_response(provider: Any) -> None:
    service = _service(provider)
    result = await service.run_task("echo_skill", {})
    assert result.response.message.content == "ok"
    assert result.response.usage.total_tokens == 12


async def test_provider_error_propagates(make_provider) -> None:
    failing = make_provider(error=ProviderError("static", "boom", status_code=503))
    service = _service(failing)

    with pytest.raises(ProviderError, match="boom") as exc_info:
        await service.run_task("echo_skill", {})

    assert exc_info.value.status_code == 503
    assert len(failing.requests) == 1


def test_exposes_provider_and_store(provider: Any, store: InMemoryContextStore) -> None:
    service = _service(provider, store=store)
    assert service.provider is provider
    assert service.context_store is store
