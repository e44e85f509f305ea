"""MessageSender protocol: the one contract delivery providers expose."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

SendStatus = Literal["queued", "sent", "failed"]


@dataclass(frozen=True)
class SendPayload:
    """A message to one or more recipients on a channel (e.g. 'sms')."""

    channel: str
    recipients: list[str]
    message: str
    idempotency_key: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SendResult:
    status: SendStatus = "sent"
    provider_message_id: str | None = None
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.status != "failed"


@runtime_checkable
class MessageSender(Protocol):
    """Protocol that SMS/email/chat delivery providers must satisfy."""

    async def send(self, payload: SendPayload) -> SendResult:
        """Deliver the payload. Delivery failures come back as ``status='failed'``."""
        ...
