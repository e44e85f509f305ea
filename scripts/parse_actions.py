#!/usr/bin/env python3
"""Extract todos, meals and events from text with the configured LLM provider.

Usage examples:
    # Plain text
    uv run python scripts/parse_actions.py "Dentist Tuesday 9am, taco night Friday"

    # Text plus an attachment (sent to the model as a data URL)
    uv run python scripts/parse_actions.py "See the flyer" --file flyer.png

    # Interpret dates in a specific timezone
    uv run python scripts/parse_actions.py "Soccer at 6pm tomorrow" --timezone Europe/Oslo
"""

import argparse
import asyncio
import base64
import json
import logging
import mimetypes
import sys
from pathlib import Path

# Allow running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from agnes.actions import ActionParseFile, ActionParseInput, parse_actionable_items
from agnes.config import settings
from agnes.llm import create_action_parsing_service
from agnes.llm.providers import create_provider


def _load_file(path: Path) -> ActionParseFile:
    mime_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
    data = base64.b64encode(path.read_bytes()).decode("ascii")
    return ActionParseFile(
        name=path.name, mime_type=mime_type, data_url=f"data:{mime_type};base64,{data}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse actionable items from text.")
    parser.add_argument("text", nargs="?", default="", help="Text to parse")
    parser.add_argument("--file", action="append", default=[], type=Path, help="Attachment")
    parser.add_argument("--timezone", default=None, help="IANA timezone (default UTC)")
    parser.add_argument("--locale", default=None, help="Locale, e.g. en-US")
    parser.add_argument("--language", default=None, help="Output language")
    args = parser.parse_args()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )

    if not args.text and not args.file:
        parser.error("provide text or at least one --file")

    request = ActionParseInput(
        text=args.text,
        files=[_load_file(p) for p in args.file],
        timezone=args.timezone,
        locale=args.locale,
        language=args.language,
    )
    service = create_action_parsing_service(create_provider())
    result = asyncio.run(parse_actionable_items(service, request))
    print(json.dumps(result.to_json_dict(), indent=2))


if __name__ == "__main__":
    main()
