"""Tests for the Anthropic (Claude) provider."""

import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest

from agnes.llm.errors import ProviderError
from agnes.llm.providers.claude import (
    DEFAULT_MAX_TOKENS,
    STRUCTURED_TOOL_NAME,
    AnthropicProvider,
    build_create_kwargs,
)
from agnes.llm.types import LlmMessage, LlmRequest, ToolDefinition

MODEL = "claude-test"


def _request(*messages: LlmMessage, **kwargs) -> LlmRequest:
    return LlmRequest(messages=list(messages), **kwargs)


def _provider_with(create: AsyncMock) -> AnthropicProvider:
    provider = AnthropicProvider("key", model=MODEL)
    client = MagicMock()
    client.messages.create = create
    provider._client = client
    return provider


def _message(*blocks, input_tokens: int = 3, output_tokens: int = 2) -> SimpleNamespace:
    return SimpleNamespace(
        content=list(blocks),
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


# -- build_create_kwargs -----------------------------------------------------


def test_kwargs_basic() -> None:
    kwargs = build_create_kwargs(
        _request(
            LlmMessage(role="system", content="Be brief."),
            LlmMessage(role="user", content="hi"),
        ),
        MODEL,
    )
    assert kwargs == {
        "model": MODEL,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "messages": [{"role": "user", "content": [{"type": "text", "text": "hi"}]}],
        "system": "Be brief.",
    }


def test_kwargs_merge_consecutive_roles() -> None:
    kwargs = build_create_kwargs(
        _request(LlmMessage(role="user", content="a"), LlmMessage(role="user", content="b")),
        MODEL,
    )
    assert kwargs["messages"] == [{
        "role": "user",
        "content": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}],
    }]


def test_kwargs_placeholder_when_empty() -> None:
    kwargs = build_create_kwargs(_request(LlmMessage(role="system", content="sys")), MODEL)
    assert kwargs["messages"] == [{"role": "user", "content": [{"type": "text", "text": "OK"}]}]


def test_kwargs_structured_tool_forced() -> None:
    schema = {"type": "object", "properties": {"todos": {"type": "array"}}}
    tool = ToolDefinition(name="lookup", description="Look up")
    kwargs = build_create_kwargs(
        _request(
            LlmMessage(role="user", content="x"),
            tools=[tool],
            response_schema=schema,
            temperature=0,
            max_tokens=2000,
        ),
        MODEL,
    )
    assert kwargs["max_tokens"] == 2000
    assert kwargs["temperature"] == 0
    assert [t["name"] for t in kwargs["tools"]] == ["lookup", STRUCTURED_TOOL_NAME]
    assert kwargs["tools"][1]["input_schema"] == schema
    assert kwargs["tool_choice"] == {"type": "tool", "name": STRUCTURED_TOOL_NAME}


def test_kwargs_attachment_blocks() -> None:
    text_data = base64.b64encode(b"milk, eggs").decode()
    content = (
        "data:image/png;base64,AAAA "
        "data:application/pdf;base64,BBBB "
        f"data:text/plain;base64,{text_data} "
        "data:application/zip;base64,CCCC"
    )
    kwargs = build_create_kwargs(_request(LlmMessage(role="user", content=content)), MODEL)
    blocks = kwargs["messages"][0]["content"]

    assert blocks[0]["type"] == "text"
    assert "[omitted]" in blocks[0]["text"]
    assert blocks[1] == {
        "type": "image",
        "source": {"type": "base64", "media_type": "image/png", "data": "AAAA"},
    }
    assert blocks[2]["type"] == "document"
    assert blocks[3] == {"type": "text", "text": "milk, eggs"}
    assert blocks[4]["text"] == "[unsupported application/zip attachment omitted]"


def test_kwargs_system_attachments_go_to_first_user_turn() -> None:
    kwargs = build_create_kwargs(
        _request(
            LlmMessage(role="system", content="See data:image/png;base64,AAAA"),
            LlmMessage(role="user", content="go"),
        ),
        MODEL,
    )
    assert kwargs["system"] == "See data:image/png;base64,[omitted]"
    assert [b["type"] for b in kwargs["messages"][0]["content"]] == ["text", "image"]


# -- generate ----------------------------------------------------------------


async def test_generate_text_response() -> None:
    create = AsyncMock(return_value=_message(SimpleNamespace(type="text", text="hello")))
    provider = _provider_with(create)

    response = await provider.generate(_request(LlmMessage(role="user", content="hi")))

    assert response.message.content == "hello"
    assert response.usage.total_tokens == 5
    assert create.call_args.kwargs["model"] == MODEL


async def test_generate_structured_response() -> None:
    tool_block = SimpleNamespace(type="tool_use", name=STRUCTURED_TOOL_NAME, input={"todos": []})
    create = AsyncMock(return_value=_message(tool_block))
    provider = _provider_with(create)

    response = await provider.generate(
        _request(LlmMessage(role="user", content="hi"), response_schema={"type": "object"})
    )

    assert response.message.content == '{"todos": []}'


async def test_generate_status_error() -> None:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    error = anthropic.APIStatusError(
        "overloaded",
        response=httpx.Response(529, request=request),
        body=None,
    )
    provider = _provider_with(AsyncMock(side_effect=error))

    with pytest.raises(ProviderError) as exc_info:
        await provider.generate(_request(LlmMessage(role="user", content="hi")))

    assert exc_info.value.status_code == 529
    assert exc_info.value.provider == "anthropic"


async def test_generate_connection_error() -> None:
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    provider = _provider_with(AsyncMock(side_effect=anthropic.APIConnectionError(request=request)))

    with pytest.raises(ProviderError) as exc_info:
        await provider.generate(_request(LlmMessage(role="user", content="hi")))

    assert exc_info.value.status_code is None


def test_client_is_created_lazily() -> None:
    provider = AnthropicProvider("key", model=MODEL)
    assert provider._client is None
    client = provider._get_client()
    assert isinstance(client, anthropic.AsyncAnthropic)
    assert provider._get_client() is client
