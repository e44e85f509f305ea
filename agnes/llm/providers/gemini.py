"""Gemini ``generateContent`` provider over httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from agnes.llm.errors import ProviderError
from agnes.llm.providers.attachments import InlineAttachment, extract_inline_attachments
from agnes.llm.types import LlmMessage, LlmRequest, LlmResponse, LlmUsage

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


def _inline_parts(attachments: list[InlineAttachment]) -> list[dict[str, Any]]:
    return [{"inlineData": {"mimeType": a.mime_type, "data": a.data}} for a in attachments]


def _build_parts(content: str) -> list[dict[str, Any]]:
    text, attachments = extract_inline_attachments(content)
    parts: list[dict[str, Any]] = []
    if text.strip():
        parts.append({"text": text})
    return parts + _inline_parts(attachments)


def build_payload(request: LlmRequest) -> dict[str, Any]:
    """Translate an ``LlmRequest`` into a Gemini request body.

    System messages become ``systemInstruction``; attachments found in them
    are moved onto the first user turn because Gemini only accepts text
    there. Tool declarations are dropped when a response schema is set.
    """
    system_text = "\n\n".join(m.content for m in request.messages if m.role == "system")
    system_text, system_attachments = extract_inline_attachments(system_text)

    contents: list[dict[str, Any]] = []
    for message in request.messages:
        if message.role == "system":
            continue
        parts = _build_parts(message.content)
        if parts:
            role = "model" if message.role == "assistant" else "user"
            contents.append({"role": role, "parts": parts})

    if system_attachments:
        if contents:
            contents[0]["parts"] = contents[0]["parts"] + _inline_parts(system_attachments)
        else:
            contents.append({"role": "user", "parts": _inline_parts(system_attachments)})

    if not contents:
        contents.append({"role": "user", "parts": [{"text": "OK"}]})

    generation_config: dict[str, Any] = {}
    if request.temperature is not None:
        generation_config["temperature"] = request.temperature
    if request.max_tokens is not None:
        generation_config["maxOutputTokens"] = request.max_tokens
    if request.response_schema is not None:
        generation_config["responseMimeType"] = "application/json"
        generation_config["responseSchema"] = request.response_schema

    payload: dict[str, Any] = {"contents": contents}
    if system_text.strip():
        payload["systemInstruction"] = {"role": "system", "parts": [{"text": system_text}]}
    # generateContent rejects function declarations alongside a JSON response schema.
    if request.tools and request.response_schema is not None:
        logger.debug(
            "Omitting %d tool declaration(s) from a structured Gemini request", len(request.tools)
        )
    elif request.tools:
        payload["tools"] = [{
            "functionDeclarations": [
                {"name": t.name, "description": t.description, "parameters": t.input_schema}
                for t in request.tools
            ]
        }]
    if generation_config:
        payload["generationConfig"] = generation_config
    return payload


def _response_text(data: dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(part.get("text", "") for part in parts)


def _usage(data: dict[str, Any]) -> LlmUsage | None:
    metadata = data.get("usageMetadata")
    if not metadata:
        return None
    return LlmUsage(
        input_tokens=metadata.get("promptTokenCount"),
        output_tokens=metadata.get("candidatesTokenCount"),
        total_tokens=metadata.get("totalTokenCount"),
    )


class GeminiProvider:
    """Schema-aware provider for Google's Generative Language API."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str | None = None,
        api_base_url: str | None = None,
        timeout: float = 60.0,
    ) -> None:
        self._api_key = api_key
        self._model = model or DEFAULT_MODEL
        self._api_base_url = (api_base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def url(self) -> str:
        return f"{self._api_base_url}/models/{self._model}:generateContent"

    async def generate(self, request: LlmRequest) -> LlmResponse:
        payload = build_payload(request)
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(
                    self.url,
                    params={"key": self._api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError as exc:
            logger.exception("Gemini request failed (network error)")
            raise ProviderError(self.name, f"Gemini request failed: {exc}") from exc

        if resp.status_code < 200 or resp.status_code >= 300:
            raise ProviderError(
                self.name,
                f"Gemini request failed ({resp.status_code}): {resp.text[:500]}",
                status_code=resp.status_code,
            )

        data = resp.json()
        return LlmResponse(
            message=LlmMessage(role="assistant", content=_response_text(data)),
            usage=_usage(data),
        )
