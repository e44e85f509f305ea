"""Family summary worker: renders a period digest and sends it by SMS."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo

from agnes.config import settings
from agnes.notifications.channels import SendPayload
from agnes.summary.periods import SummaryPeriod, daily_period, weekly_period

if TYPE_CHECKING:
    from agnes.llm.service import LlmService
    from agnes.notifications.channels import MessageSender
    from agnes.summary.models import Family, SummaryData

logger = logging.getLogger(__name__)

SKILL_NAME = "family_summary_sms"
USER_MESSAGE = "Summarize the family's upcoming plans and tasks."


class FamilyDirectory(Protocol):
    async def list_families(self) -> list[Family]: ...

    async def find_family(self, family_id: str) -> Family | None: ...


class SummaryDataFetcher(Protocol):
    async def __call__(self, family_id: str, period: SummaryPeriod) -> SummaryData: ...


def format_date_time(value: str) -> str:
    """Short human date like 'Mon, Mar 10, 9:00 AM'; unparsable input is returned as-is."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return value
    hour = parsed.hour % 12 or 12
    suffix = "AM" if parsed.hour < 12 else "PM"
    return f"{parsed.strftime('%a, %b')} {parsed.day}, {hour}:{parsed.minute:02d} {suffix}"


def _format_items(items: list[str]) -> str:
    return "\n".join(items) if items else "None"


def _format_quantity(value: float | None) -> str:
    if value is None:
        return ""
    return f"{int(value) if float(value).is_integer() else value} "


def build_summary_input(family: Family, period: SummaryPeriod, data: SummaryData) -> dict[str, str]:
    """Prompt parameters for the ``family_summary_sms`` skill."""
    return {
        "familyName": family.name,
        "periodLabel": period.label,
        "calendarItems": _format_items(
            [f"{e.title} ({format_date_time(e.start)})" for e in data.events]
        ),
        "todoItems": _format_items(
            [f"{t.title} - {t.notes}" if t.notes else t.title for t in data.todos]
        ),
        "mealItems": _format_items([
            f"{m.title} ({m.meal_type}) - "
            f"{format_date_time(m.scheduled_for) if m.scheduled_for else 'TBD'}"
            for m in data.meals
        ]),
        "shoppingItems": _format_items([
            (
                f"{_format_quantity(i.quantity)}{i.unit + ' ' if i.unit else ''}{i.title}"
                f"{' - ' + i.notes if i.notes else ''}"
            ).strip()
            for i in data.shopping_list
        ]),
        "userMessage": USER_MESSAGE,
    }


def build_idempotency_key(family_id: str, period: SummaryPeriod) -> str:
    return f"family-summary-{family_id}-{period.start.date().isoformat()}"


def sms_recipients(family: Family) -> list[str]:
    return [m.phone_number for m in family.members if m.phone_number]


class SummaryWorker:
    """Generates and sends daily/weekly family summaries.

    Args:
        llm_service: Service with the ``family_summary_sms`` skill registered.
        sender: Delivery provider for the SMS group message.
        directory: Source of families.
        fetch_data: Loads a family's events, todos, meals and shopping list.
        now: Clock, injectable for tests. Defaults to the current time in
            ``settings.summary_timezone``, the zone the scheduler fires in.
    """

    def __init__(
        self,
        llm_service: LlmService,
        sender: MessageSender,
        directory: FamilyDirectory,
        fetch_data: SummaryDataFetcher,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self._llm = llm_service
        self._sender = sender
        self._directory = directory
        self._fetch_data = fetch_data
        self._now = now or (lambda: datetime.now(ZoneInfo(settings.summary_timezone)))

    async def run_for_family(self, family: Family, period: SummaryPeriod) -> bool:
        """Summarize one family's period. Returns True if an SMS was sent.

        Failures are logged and re-raised.
        """
        logger.info(
            "Summary for family %s (%s) started: %s",
            family.id,
            family.name,
            period.label,
        )
        try:
            data = await self._fetch_data(family.id, period)
            logger.debug(
                "Summary data for %s: %d event(s), %d todo(s), %d meal(s), %d shopping item(s)",
                family.id,
                len(data.events),
                len(data.todos),
                len(data.meals),
                len(data.shopping_list),
            )

            result = await self._llm.run_task(
                SKILL_NAME, build_summary_input(family, period, data)
            )
            summary_text = result.response.message.content.strip()
            recipients = sms_recipients(family)

            if not recipients:
                logger.warning("Summary for family %s skipped: no SMS recipients", family.id)
                return False
            if not summary_text:
                logger.warning("Summary for family %s skipped: empty summary text", family.id)
                return False

            idempotency_key = build_idempotency_key(family.id, period)
            send_result = await self._sender.send(
                SendPayload(
                    channel="sms",
                    recipients=recipients,
                    message=summary_text,
                    idempotency_key=idempotency_key,
                )
            )
        except Exception:
            logger.exception("Summary for family %s failed (%s)", family.id, period.label)
            raise

        if not send_result.success:
            logger.error(
                "Summary SMS for family %s failed: %s", family.id, send_result.error
            )
            return False

        logger.info(
            "Summary SMS sent to %d recipient(s) for family %s (key=%s)",
            len(recipients),
            family.id,
            idempotency_key,
        )
        return True

    async def _run_for_family_id(self, family_id: str, period: SummaryPeriod) -> bool:
        family = await self._directory.find_family(family_id)
        if family is None:
            logger.warning("Summary skipped: family %s not found", family_id)
            return False
        return await self.run_for_family(family, period)

    async def _run_all(self, build_period: Callable[[datetime], SummaryPeriod]) -> int:
        period = build_period(self._now())
        families = await self._directory.list_families()
        logger.info("Summary batch started for %d family(ies): %s", len(families), period.label)
        sent = 0
        for family in families:
            if await self.run_for_family(family, period):
                sent += 1
        logger.info("Summary batch complete: %d/%d sent", sent, len(families))
        return sent

    async def run_daily(self) -> int:
        return await self._run_all(daily_period)

    async def run_weekly(self) -> int:
        return await self._run_all(weekly_period)

    async def run_daily_for_family(self, family_id: str) -> bool:
        return await self._run_for_family_id(family_id, daily_period(self._now()))

    async def run_weekly_for_family(self, family_id: str) -> bool:
        return await self._run_for_family_id(family_id, weekly_period(self._now()))
