"""APScheduler wiring for the daily and weekly summary batches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from agnes.config import settings

if TYPE_CHECKING:
    from agnes.summary.worker import SummaryWorker

logger = logging.getLogger(__name__)

DAILY_JOB_ID = "family-summary-daily"
WEEKLY_JOB_ID = "family-summary-weekly"


class SummaryScheduler:
    """Runs ``SummaryWorker`` batches on cron schedules.

    Args:
        worker: The summary worker to drive.
        timezone: IANA timezone for the cron expressions (default from settings).
        daily_cron: Crontab for daily summaries (default from settings).
        weekly_cron: Crontab for weekly summaries (default from settings).
    """

    def __init__(
        self,
        worker: SummaryWorker,
        timezone: str | None = None,
        daily_cron: str | None = None,
        weekly_cron: str | None = None,
    ) -> None:
        self._worker = worker
        self._timezone = timezone or settings.summary_timezone
        self._daily_cron = daily_cron or settings.daily_summary_cron
        self._weekly_cron = weekly_cron or settings.weekly_summary_cron
        self._scheduler = AsyncIOScheduler(timezone=self._timezone)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def add_jobs(self) -> None:
        """Register both batch jobs without starting the scheduler."""
        self._scheduler.add_job(
            self._run_daily,
            trigger=CronTrigger.from_crontab(self._daily_cron, timezone=self._timezone),
            id=DAILY_JOB_ID,
            name="Daily family summaries",
            misfire_grace_time=None,
            replace_existing=True,
        )
        self._scheduler.add_job(
            self._run_weekly,
            trigger=CronTrigger.from_crontab(self._weekly_cron, timezone=self._timezone),
            id=WEEKLY_JOB_ID,
            name="Weekly family summaries",
            misfire_grace_time=None,
            replace_existing=True,
        )

    def get_job(self, job_id: str):
        return self._scheduler.get_job(job_id)

    async def start(self) -> None:
        self.add_jobs()
        self._scheduler.start()
        self._running = True
        logger.info(
            "Summary scheduler started (daily=%r, weekly=%r, tz=%s)",
            self._daily_cron,
            self._weekly_cron,
            self._timezone,
        )

    async def stop(self) -> None:
        if self._running:
            self._scheduler.shutdown(wait=False)
            self._running = False
            logger.info("Summary scheduler stopped")

    async def _run_daily(self) -> None:
        try:
            await self._worker.run_daily()
        except Exception:
            logger.exception("Daily summary batch failed")

    async def _run_weekly(self) -> None:
        try:
            await self._worker.run_weekly()
        except Exception:
            logger.exception("Weekly summary batch failed")
