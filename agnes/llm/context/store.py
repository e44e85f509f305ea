"""Scoped in-memory context store with naive lexical search."""

from __future__ import annotations

import re
import threading
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

EXCERPT_LENGTH = 160
EXCERPT_LEAD = 40

_NON_WORD = re.compile(r"\W+")


def tokenize(value: str) -> list[str]:
    """Lower-case and split on non-word characters, dropping empties."""
    return [token for token in _NON_WORD.split(value.lower()) if token]


@dataclass(frozen=True)
class ContextDocument:
    """A short text snippet owned by the caller that added it to ``scope``."""

    scope: str
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    metadata: dict[str, str] | None = None
    created_at: str = field(default_factory=lambda: datetime.now(UTC).isoformat())


@dataclass(frozen=True)
class ContextSearchResult:
    document: ContextDocument
    score: float
    excerpt: str


class ContextStore(Protocol):
    async def add_documents(self, docs: list[ContextDocument]) -> None: ...

    async def list_documents(self, scope: str) -> list[ContextDocument]: ...

    async def search(self, scope: str, query: str) -> list[ContextSearchResult]: ...


def build_excerpt(text: str, terms: list[str]) -> str:
    """Window of the text around the first query term found in it."""
    lower = text.lower()
    match = next((term for term in terms if term in lower), None)
    if match is None:
        return text[:EXCERPT_LENGTH]
    start = max(lower.index(match) - EXCERPT_LEAD, 0)
    return text[start : start + EXCERPT_LENGTH]


class InMemoryContextStore:
    """Append-only documents partitioned by scope.

    Each scope holds an immutable tuple that is swapped on append, so a
    concurrent ``search`` sees either the old or the new list, never a
    partial one. Duplicate ids are kept and both match future searches.
    """

    def __init__(self) -> None:
        self._docs: dict[str, tuple[ContextDocument, ...]] = {}
        self._lock = threading.Lock()

    async def add_documents(self, docs: list[ContextDocument]) -> None:
        with self._lock:
            for doc in docs:
                self._docs[doc.scope] = (*self._docs.get(doc.scope, ()), doc)

    async def list_documents(self, scope: str) -> list[ContextDocument]:
        return list(self._docs.get(scope, ()))

    async def search(self, scope: str, query: str) -> list[ContextSearchResult]:
        """Rank the scope's documents by query-term overlap.

        Score is matched distinct query terms divided by the document's
        token count, so it lies in (0, 1]. Zero-score documents are
        omitted; ties keep insertion order.
        """
        terms = list(dict.fromkeys(tokenize(query)))
        if not terms:
            return []

        results: list[ContextSearchResult] = []
        for doc in self._docs.get(scope, ()):
            tokens = tokenize(doc.text)
            vocabulary = set(tokens)
            overlap = sum(1 for term in terms if term in vocabulary)
            if overlap == 0:
                continue
            results.append(
                ContextSearchResult(
                    document=doc,
                    score=overlap / max(len(tokens), 1),
                    excerpt=build_excerpt(doc.text, terms),
                )
            )

        results.sort(key=lambda r: r.score, reverse=True)
        return results
