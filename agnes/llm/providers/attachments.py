"""Pull inline base64 attachments (data URLs) out of message text."""

from __future__ import annotations

import re
from dataclasses import dataclass

DATA_URL_PATTERN = re.compile(r"data:([^;\s]+);base64,([A-Za-z0-9+/=]+)")


@dataclass(frozen=True)
class InlineAttachment:
    mime_type: str
    data: str


def extract_inline_attachments(content: str) -> tuple[str, list[InlineAttachment]]:
    """Split ``content`` into text and attachments.

    Each data URL is replaced in the text by ``data:<mime>;base64,[omitted]``
    so the model still sees where the attachment sat.
    """
    attachments: list[InlineAttachment] = []

    def _replace(match: re.Match[str]) -> str:
        mime_type, data = match.group(1), match.group(2)
        attachments.append(InlineAttachment(mime_type=mime_type, data=data))
        return f"data:{mime_type};base64,[omitted]"

    text = DATA_URL_PATTERN.sub(_replace, content)
    return text, attachments
