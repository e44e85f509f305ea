"""Action extraction: typed records, the normalizer and the parse entry point."""

from agnes.actions.models import (
    ActionParseContext,
    ActionParseEvent,
    ActionParseFile,
    ActionParseInput,
    ActionParseMeal,
    ActionParseResult,
    ActionParseTodo,
    EventLocation,
    EventTime,
    FamilyMemberContext,
)
from agnes.actions.normalize import DEFAULT_EVENT_DURATION, normalize_actionable_items
from agnes.actions.service import parse_actionable_items

__all__ = [
    "DEFAULT_EVENT_DURATION",
    "ActionParseContext",
    "ActionParseEvent",
    "ActionParseFile",
    "ActionParseInput",
    "ActionParseMeal",
    "ActionParseResult",
    "ActionParseTodo",
    "EventLocation",
    "EventTime",
    "FamilyMemberContext",
    "normalize_actionable_items",
    "parse_actionable_items",
]
