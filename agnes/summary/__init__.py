"""Scheduled family summaries."""

from agnes.summary.models import Family, FamilyMember, SummaryData
from agnes.summary.periods import SummaryPeriod, daily_period, weekly_period
from agnes.summary.scheduler import SummaryScheduler
from agnes.summary.worker import SummaryWorker

__all__ = [
    "Family",
    "FamilyMember",
    "SummaryData",
    "SummaryPeriod",
    "SummaryScheduler",
    "SummaryWorker",
    "daily_period",
    "weekly_period",
]
