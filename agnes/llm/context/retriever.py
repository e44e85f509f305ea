"""Budgeted retrieval on top of a context store."""

from __future__ import annotations

import logging
from typing import Protocol

from agnes.llm.context.store import ContextSearchResult, ContextStore

logger = logging.getLogger(__name__)


def estimate_tokens(value: str) -> int:
    """Approximate token count: whitespace-separated words."""
    return len(value.split())


class ContextRetriever(Protocol):
    async def retrieve(
        self, *, scope: str, query: str, max_tokens: int, max_results: int
    ) -> list[ContextSearchResult]: ...


class ContextStoreRetriever:
    """Caps search hits by count, then by a token budget.

    Excerpts are taken in rank order until the next one would push the
    total past ``max_tokens``; that excerpt and everything after it are
    dropped, even if a later one would still fit.
    """

    def __init__(self, store: ContextStore) -> None:
        self._store = store

    async def retrieve(
        self, *, scope: str, query: str, max_tokens: int, max_results: int
    ) -> list[ContextSearchResult]:
        results = await self._store.search(scope, query)
        selected: list[ContextSearchResult] = []
        used_tokens = 0

        for result in results[:max_results]:
            estimate = estimate_tokens(result.excerpt)
            if used_tokens + estimate > max_tokens:
                break
            selected.append(result)
            used_tokens += estimate

        logger.debug(
            "Retrieved %d/%d context hit(s) for scope '%s' (%d tokens)",
            len(selected),
            len(results),
            scope,
            used_tokens,
        )
        return selected
