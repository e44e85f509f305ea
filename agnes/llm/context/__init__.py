"""Scoped context documents and budgeted retrieval."""

from agnes.llm.context.retriever import ContextRetriever, ContextStoreRetriever, estimate_tokens
from agnes.llm.context.store import (
    ContextDocument,
    ContextSearchResult,
    ContextStore,
    InMemoryContextStore,
    tokenize,
)

__all__ = [
    "ContextDocument",
    "ContextRetriever",
    "ContextSearchResult",
    "ContextStore",
    "ContextStoreRetriever",
    "InMemoryContextStore",
    "estimate_tokens",
    "tokenize",
]
