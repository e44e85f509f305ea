"""Outbound message contract used by workers."""

from agnes.notifications.channels import MessageSender, SendPayload, SendResult

__all__ = ["MessageSender", "SendPayload", "SendResult"]
