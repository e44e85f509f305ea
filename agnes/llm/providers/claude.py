"""Claude provider built on the Anthropic SDK."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any

import anthropic

from agnes.llm.errors import ProviderError
from agnes.llm.providers.attachments import InlineAttachment, extract_inline_attachments
from agnes.llm.types import LlmMessage, LlmRequest, LlmResponse, LlmUsage

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 4096

# Name of the forced tool used to get schema-shaped JSON back from Claude.
STRUCTURED_TOOL_NAME = "structured_response"

_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


def _attachment_block(attachment: InlineAttachment) -> dict[str, Any]:
    source = {"type": "base64", "media_type": attachment.mime_type, "data": attachment.data}
    if attachment.mime_type in _IMAGE_TYPES:
        return {"type": "image", "source": source}
    if attachment.mime_type == "application/pdf":
        return {"type": "document", "source": source}
    if attachment.mime_type.startswith("text/"):
        try:
            decoded = base64.b64decode(attachment.data).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError):
            decoded = ""
        return {"type": "text", "text": decoded or f"[{attachment.mime_type} attachment]"}
    return {"type": "text", "text": f"[unsupported {attachment.mime_type} attachment omitted]"}


def _content_blocks(content: str) -> list[dict[str, Any]]:
    text, attachments = extract_inline_attachments(content)
    blocks: list[dict[str, Any]] = []
    if text.strip():
        blocks.append({"type": "text", "text": text})
    return blocks + [_attachment_block(a) for a in attachments]


def build_create_kwargs(request: LlmRequest, model: str) -> dict[str, Any]:
    """Translate an ``LlmRequest`` into ``messages.create`` keyword arguments."""
    system_text = "\n\n".join(m.content for m in request.messages if m.role == "system")
    system_text, system_attachments = extract_inline_attachments(system_text)

    messages: list[dict[str, Any]] = []
    for message in request.messages:
        if message.role == "system":
            continue
        blocks = _content_blocks(message.content)
        if not blocks:
            continue
        role = "assistant" if message.role == "assistant" else "user"
        if messages and messages[-1]["role"] == role:
            messages[-1]["content"].extend(blocks)
        else:
            messages.append({"role": role, "content": blocks})

    if system_attachments:
        extra = [_attachment_block(a) for a in system_attachments]
        if messages and messages[0]["role"] == "user":
            messages[0]["content"].extend(extra)
        else:
            messages.insert(0, {"role": "user", "content": extra})

    if not messages:
        messages.append({"role": "user", "content": [{"type": "text", "text": "OK"}]})

    kwargs: dict[str, Any] = {
        "model": model,
        "max_tokens": request.max_tokens or DEFAULT_MAX_TOKENS,
        "messages": messages,
    }
    if system_text.strip():
        kwargs["system"] = system_text
    if request.temperature is not None:
        kwargs["temperature"] = request.temperature

    tools = [
        {"name": t.name, "description": t.description, "input_schema": t.input_schema}
        for t in request.tools
    ]
    if request.response_schema is not None:
        tools.append({
            "name": STRUCTURED_TOOL_NAME,
            "description": "Return the final answer as JSON matching this schema.",
            "input_schema": request.response_schema,
        })
        kwargs["tool_choice"] = {"type": "tool", "name": STRUCTURED_TOOL_NAME}
    if tools:
        kwargs["tools"] = tools
    return kwargs


def _response_text(content: list[Any]) -> str:
    for block in content:
        if block.type == "tool_use" and block.name == STRUCTURED_TOOL_NAME:
            return json.dumps(block.input)
    return "".join(block.text for block in content if block.type == "text")


class AnthropicProvider:
    """Schema-aware provider for Claude models."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client: anthropic.AsyncAnthropic | None = None

    @property
    def name(self) -> str:
        return "anthropic"

    def _get_client(self) -> anthropic.AsyncAnthropic:
        """Lazily initialize the Anthropic client."""
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key, timeout=self._timeout)
        return self._client

    async def generate(self, request: LlmRequest) -> LlmResponse:
        kwargs = build_create_kwargs(request, self._model)
        try:
            response = await self._get_client().messages.create(**kwargs)
        except anthropic.APIStatusError as exc:
            raise ProviderError(
                self.name,
                f"Anthropic request failed ({exc.status_code}): {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except anthropic.APIError as exc:
            raise ProviderError(self.name, f"Anthropic request failed: {exc}") from exc

        usage = None
        if response.usage is not None:
            usage = LlmUsage(
                input_tokens=response.usage.input_tokens,
                output_tokens=response.usage.output_tokens,
                total_tokens=response.usage.input_tokens + response.usage.output_tokens,
            )
        return LlmResponse(
            message=LlmMessage(role="assistant", content=_response_text(response.content)),
            usage=usage,
        )
