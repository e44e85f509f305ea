"""Generative backends and the factory that picks one from settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from agnes.llm.providers.claude import AnthropicProvider
from agnes.llm.providers.gemini import GeminiProvider
from agnes.llm.providers.null import NullProvider

if TYPE_CHECKING:
    from agnes.config import Settings
    from agnes.llm.types import LlmProvider

logger = logging.getLogger(__name__)


def create_provider(config: Settings | None = None) -> LlmProvider:
    """Build the provider selected by ``LLM_PROVIDER`` (``auto`` by default)."""
    if config is None:
        from agnes.config import settings as config

    name = config.resolve_provider_name()
    if name == "gemini" and config.gemini_api_key:
        provider: LlmProvider = GeminiProvider(
            config.gemini_api_key,
            model=config.gemini_model,
            api_base_url=config.gemini_api_base_url,
            timeout=config.llm_timeout_s,
        )
    elif name == "anthropic" and config.anthropic_api_key:
        provider = AnthropicProvider(
            config.anthropic_api_key,
            model=config.claude_model,
            timeout=config.llm_timeout_s,
        )
    else:
        if name != "null":
            logger.warning("LLM provider '%s' is not configured, using null provider", name)
        provider = NullProvider()

    logger.info("LLM provider: %s", provider.name)
    return provider


__all__ = ["AnthropicProvider", "GeminiProvider", "NullProvider", "create_provider"]
