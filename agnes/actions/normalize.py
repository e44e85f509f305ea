"""Turn untrusted model output into validated action records.

The provider is asked for schema-shaped JSON but nothing guarantees it
complied. Everything here treats the parsed payload as arbitrary JSON:

- invalid top-level JSON raises ``ResponseFormatError``;
- ``todos``/``meals``/``events`` that are missing or not arrays are empty;
- an item without a non-blank title or a finite numeric confidence is
  dropped; numeric confidences are clamped into [0, 1];
- dates are re-emitted as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``; an invalid meal
  date is dropped from the meal, an event without a valid start is dropped
  entirely, and a missing or invalid event end becomes start + 60 minutes;
- blank or invalid optional fields become ``None``;
- repeated items (same case-insensitive title, notes, times, location and
  recurrence) keep only their first occurrence.

Dropped items are not reported individually.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Callable, Hashable
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any, TypeVar
from urllib.parse import urlparse
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agnes.actions.models import (
    ActionParseEvent,
    ActionParseMeal,
    ActionParseResult,
    ActionParseTodo,
    EventLocation,
    EventTime,
)
from agnes.llm.errors import ResponseFormatError

logger = logging.getLogger(__name__)

DEFAULT_EVENT_DURATION = timedelta(minutes=60)
MEAL_TYPES = frozenset({"breakfast", "lunch", "dinner", "snack"})

T = TypeVar("T")

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


# -- JSON --------------------------------------------------------------------


def _json_candidate(content: str) -> str:
    """Best guess at the JSON object inside chatty or fenced output."""
    trimmed = content.strip()
    fenced = _FENCED_JSON.search(trimmed)
    if fenced and fenced.group(1):
        return fenced.group(1).strip()
    first, last = trimmed.find("{"), trimmed.rfind("}")
    if first >= 0 and last > first:
        return trimmed[first : last + 1]
    return trimmed


def parse_json_response(content: str) -> dict[str, Any]:
    """Parse model output as a JSON object.

    Non-object JSON (a bare list, a number) parses to ``{}``.
    """
    candidates = list(dict.fromkeys(c for c in (content.strip(), _json_candidate(content)) if c))
    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except ValueError:
            continue
        return parsed if isinstance(parsed, dict) else {}
    raise ResponseFormatError


# -- Field normalizers --------------------------------------------------------


def _as_record(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def normalize_confidence(value: Any) -> float | None:
    """Clamp a finite number into [0, 1]; anything else is ``None``."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, int):
        # float() overflows on huge JSON integers; compare them as ints.
        return float(min(1, max(0, value)))
    if not math.isfinite(value):
        return None
    return min(1.0, max(0.0, value))


def normalize_optional_string(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_string_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    items = [s for s in (normalize_optional_string(v) for v in value) if s]
    return items or None


def _zone(name: str | None) -> tzinfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def format_timestamp(value: datetime) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix."""
    utc = value.astimezone(UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_datetime(value: Any, default_zone: tzinfo = UTC) -> datetime | None:
    """Parse an ISO 8601 string into an aware UTC datetime.

    Naive values are read in ``default_zone``. Unparsable or
    unrepresentable values return ``None``.
    """
    text = normalize_optional_string(value)
    if text is None:
        return None
    try:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=default_zone)
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def normalize_datetime(value: Any, default_zone: tzinfo = UTC) -> str | None:
    parsed = parse_datetime(value, default_zone)
    return format_timestamp(parsed) if parsed else None


def normalize_servings(value: Any) -> int | float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return None
        return value if value > 0 else None
    if not math.isfinite(value) or value <= 0:
        return None
    return int(value) if value.is_integer() else value


def normalize_url(value: Any) -> str | None:
    text = normalize_optional_string(value)
    if text is None:
        return None
    parsed = urlparse(text)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return text


def normalize_meal_type(value: Any) -> str | None:
    text = normalize_optional_string(value)
    if text is None:
        return None
    text = text.lower()
    return text if text in MEAL_TYPES else None


# -- Items -------------------------------------------------------------------


def _title_and_confidence(record: dict[str, Any]) -> tuple[str, float] | None:
    title = normalize_optional_string(record.get("title"))
    confidence = normalize_confidence(record.get("confidence"))
    if not title or confidence is None:
        return None
    return title, confidence


def normalize_todo(item: Any) -> ActionParseTodo | None:
    record = _as_record(item)
    required = _title_and_confidence(record)
    if required is None:
        return None
    title, confidence = required
    return ActionParseTodo(
        title=title,
        confidence=confidence,
        notes=normalize_optional_string(record.get("notes")),
        recurrence=normalize_string_list(record.get("recurrence")),
        confidence_reasons=normalize_string_list(record.get("confidenceReasons")),
        source=normalize_optional_string(record.get("source")),
    )


def normalize_meal(item: Any, default_zone: tzinfo = UTC) -> ActionParseMeal | None:
    record = _as_record(item)
    required = _title_and_confidence(record)
    if required is None:
        return None
    title, confidence = required
    return ActionParseMeal(
        title=title,
        confidence=confidence,
        notes=normalize_optional_string(record.get("notes")),
        meal_type=normalize_meal_type(record.get("mealType")),
        scheduled_for=normalize_datetime(record.get("scheduledFor"), default_zone),
        servings=normalize_servings(record.get("servings")),
        recipe_url=normalize_url(record.get("recipeUrl")),
        source=normalize_optional_string(record.get("source")),
    )


def _time_record(value: Any) -> dict[str, Any]:
    # A bare string is accepted as the dateTime itself.
    if isinstance(value, str):
        return {"dateTime": value}
    return _as_record(value)


def _normalize_location(value: Any) -> EventLocation | None:
    record = _as_record(value)
    location = EventLocation(
        name=normalize_optional_string(record.get("name")),
        address=normalize_optional_string(record.get("address")),
        meeting_url=normalize_optional_string(record.get("meetingUrl")),
    )
    if location.name is None and location.address is None and location.meeting_url is None:
        return None
    return location


def normalize_event(item: Any, default_zone: tzinfo = UTC) -> ActionParseEvent | None:
    record = _as_record(item)
    required = _title_and_confidence(record)
    if required is None:
        return None
    title, confidence = required

    start_record = _time_record(record.get("start"))
    start_zone_name = normalize_optional_string(start_record.get("timeZone"))
    start = parse_datetime(start_record.get("dateTime"), _zone(start_zone_name) or default_zone)
    if start is None:
        return None

    end_record = _time_record(record.get("end"))
    end_zone_name = normalize_optional_string(end_record.get("timeZone")) or start_zone_name
    end = parse_datetime(end_record.get("dateTime"), _zone(end_zone_name) or default_zone)
    if end is None:
        try:
            end = start + DEFAULT_EVENT_DURATION
        except OverflowError:
            return None

    return ActionParseEvent(
        title=title,
        confidence=confidence,
        description=normalize_optional_string(record.get("description")),
        start=EventTime(date_time=format_timestamp(start), time_zone=start_zone_name),
        end=EventTime(date_time=format_timestamp(end), time_zone=end_zone_name),
        location=_normalize_location(record.get("location")),
        recurrence=normalize_string_list(record.get("recurrence")),
        confidence_reasons=normalize_string_list(record.get("confidenceReasons")),
        source=normalize_optional_string(record.get("source")),
    )


# -- De-duplication ----------------------------------------------------------


def _key_part(value: str | None) -> str:
    return (value or "").lower()


def _key_list(values: list[str] | None) -> str:
    return "|".join(v.lower() for v in values or [])


def todo_key(todo: ActionParseTodo) -> tuple[str, ...]:
    return (_key_part(todo.title), _key_part(todo.notes), _key_list(todo.recurrence))


def meal_key(meal: ActionParseMeal) -> tuple[str, ...]:
    return (
        _key_part(meal.title),
        _key_part(meal.notes),
        _key_part(meal.meal_type),
        _key_part(meal.scheduled_for),
    )


def event_key(event: ActionParseEvent) -> tuple[str, ...]:
    location = event.location or EventLocation()
    return (
        _key_part(event.title),
        _key_part(event.description),
        _key_part(event.start.date_time),
        _key_part(event.start.time_zone),
        _key_part(event.end.date_time),
        _key_part(event.end.time_zone),
        _key_part(location.name),
        _key_part(location.address),
        _key_part(location.meeting_url),
        _key_list(event.recurrence),
    )


def dedupe(items: list[T], key: Callable[[T], Hashable]) -> list[T]:
    """Keep the first item for each case-insensitive key, in order."""
    seen: set[Hashable] = set()
    unique: list[T] = []
    for item in items:
        item_key = key(item)
        if item_key in seen:
            continue
        seen.add(item_key)
        unique.append(item)
    return unique


# -- Entry point -------------------------------------------------------------


def normalize_actionable_items(content: str, *, default_timezone: str = "UTC") -> ActionParseResult:
    """Parse and validate raw extraction output.

    Args:
        content: Raw assistant text, expected to hold a JSON object.
        default_timezone: IANA zone for dates that carry no offset.

    Raises:
        ResponseFormatError: the content is not valid JSON.
    """
    parsed = parse_json_response(content)
    zone = _zone(default_timezone) or UTC

    raw_todos = _as_list(parsed.get("todos"))
    raw_meals = _as_list(parsed.get("meals"))
    raw_events = _as_list(parsed.get("events"))

    result = ActionParseResult(
        todos=dedupe([t for t in map(normalize_todo, raw_todos) if t], todo_key),
        meals=dedupe([m for m in (normalize_meal(i, zone) for i in raw_meals) if m], meal_key),
        events=dedupe(
            [e for e in (normalize_event(i, zone) for i in raw_events) if e], event_key
        ),
    )

    raw_total = len(raw_todos) + len(raw_meals) + len(raw_events)
    if raw_total and not result.total:
        logger.warning("All %d extracted item(s) were dropped during normalization", raw_total)
    elif raw_total != result.total:
        logger.info(
            "Dropped %d of %d extracted item(s) (invalid or duplicate)",
            raw_total - result.total,
            raw_total,
        )
    return result
