"""Time windows covered by family summaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class SummaryPeriod:
    start: datetime
    end: datetime
    label: str


def _format_date(value: datetime) -> str:
    return f"{value.strftime('%b')} {value.day}"


def daily_period(now: datetime) -> SummaryPeriod:
    """The calendar day containing ``now`` (in ``now``'s timezone)."""
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1) - timedelta(milliseconds=1)
    return SummaryPeriod(start=start, end=end, label=f"today ({_format_date(start)})")


def weekly_period(now: datetime) -> SummaryPeriod:
    """Monday 00:00 through Sunday 23:59:59.999 of ``now``'s week."""
    start = (now - timedelta(days=now.weekday())).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    end = start + timedelta(days=7) - timedelta(milliseconds=1)
    return SummaryPeriod(
        start=start, end=end, label=f"{_format_date(start)} - {_format_date(end)}"
    )
