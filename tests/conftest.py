"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from agnes.llm.context.store import InMemoryContextStore
from agnes.llm.types import LlmMessage, LlmRequest, LlmResponse, LlmUsage


class StaticProvider:
    """Provider that records requests and answers with fixed content."""

    def __init__(self, content: str = "", *, error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.requests: list[LlmRequest] = []

    @property
    def name(self) -> str:
        return "static"

    async def generate(self, request: LlmRequest) -> LlmResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return LlmResponse(
            message=LlmMessage(role="assistant", content=self.content),
            usage=LlmUsage(input_tokens=5, output_tokens=7, total_tokens=12),
        )


@pytest.fixture
def make_provider() -> Callable[..., StaticProvider]:
    """Factory for providers answering with text, a JSON payload, or an error."""

    def _make(
        content: str | dict[str, Any] = "", *, error: Exception | None = None
    ) -> StaticProvider:
        if isinstance(content, dict):
            content = json.dumps(content)
        return StaticProvider(content, error=error)

    return _make


@pytest.fixture
def provider(make_provider) -> StaticProvider:
    return make_provider("ok")


@pytest.fixture
def store() -> InMemoryContextStore:
    """Fresh, isolated context store for each test."""
    return InMemoryContextStore()
