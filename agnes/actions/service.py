"""Action extraction: run the extraction skill and normalize its output."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from agnes.actions.models import ActionParseInput, ActionParseResult
from agnes.actions.normalize import format_timestamp, normalize_actionable_items

if TYPE_CHECKING:
    from agnes.llm.service import LlmService

logger = logging.getLogger(__name__)

SKILL_NAME = "extract_actionable_items"
MAX_OUTPUT_TOKENS = 2000
DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOCALE = "en-US"


def build_source_text(request: ActionParseInput) -> str:
    """User text followed by one block per attachment (data URL included)."""
    lines: list[str] = []
    text = request.text.strip()
    if text:
        lines += ["User text:", text]

    for index, file in enumerate(request.files, start=1):
        lines += [
            "",
            f"Attachment {index}:",
            f"Name: {file.name}",
            f"MimeType: {file.mime_type}",
            f"DataUrl: {file.data_url}",
        ]
    return "\n".join(lines)


def _resolve_zone(name: str) -> tuple[str, ZoneInfo]:
    try:
        return name, ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone '%s', falling back to %s", name, DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE, ZoneInfo(DEFAULT_TIMEZONE)


def build_request_context(request: ActionParseInput, now: datetime | None = None) -> dict[str, Any]:
    """Date and family facts the model needs to resolve relative dates."""
    hints = request.context
    timezone_name = (hints and hints.timezone) or request.timezone or DEFAULT_TIMEZONE
    timezone_name, zone = _resolve_zone(timezone_name.strip() or DEFAULT_TIMEZONE)
    locale = (hints and hints.locale) or request.locale or DEFAULT_LOCALE

    current = (now or datetime.now(UTC)).astimezone(zone)
    week_number = hints.week_number if hints else None
    source_metadata = hints.source_metadata if hints else None

    return {
        "familyMembers": [
            m.model_dump(by_alias=True, exclude_none=True)
            for m in (hints.family_members if hints else [])
        ],
        "currentDateTime": (hints and hints.current_date_time) or format_timestamp(current),
        "timezone": timezone_name,
        "weekNumber": week_number if week_number is not None else current.isocalendar().week,
        "weekday": (hints and hints.weekday) or current.strftime("%A"),
        "locale": locale,
        "sourceMetadata": source_metadata
        if source_metadata is not None
        else {
            "fileCount": len(request.files),
            "fileNames": [f.name for f in request.files],
            "hasText": bool(request.text.strip()),
        },
    }


async def parse_actionable_items(
    llm_service: LlmService,
    request: ActionParseInput,
    *,
    now: datetime | None = None,
) -> ActionParseResult:
    """Extract todos, meals and events from free text and attachments.

    Attachments must already be validated by the caller.

    Raises:
        ResponseFormatError: the model did not return valid JSON.
        LlmError: the skill is not wired up or the provider failed.
    """
    context = build_request_context(request, now)
    task = await llm_service.run_task(
        SKILL_NAME,
        {
            "sourceText": build_source_text(request),
            "timezone": context["timezone"],
            "locale": context["locale"],
            "language": request.language or "",
            "contextJson": json.dumps(context, indent=2),
        },
        max_tokens=MAX_OUTPUT_TOKENS,
        temperature=0,
    )

    result = normalize_actionable_items(
        task.response.message.content or "",
        default_timezone=context["timezone"],
    )
    logger.info(
        "Parsed %d todo(s), %d meal(s), %d event(s)",
        len(result.todos),
        len(result.meals),
        len(result.events),
    )
    return result
