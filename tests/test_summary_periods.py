"""Tests for summary period windows."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from agnes.summary import daily_period, weekly_period

WEDNESDAY = datetime(2025, 3, 12, 15, 30, tzinfo=UTC)


def test_daily_period_covers_the_day() -> None:
    period = daily_period(WEDNESDAY)
    assert period.start == datetime(2025, 3, 12, tzinfo=UTC)
    assert period.end == datetime(2025, 3, 12, 23, 59, 59, 999000, tzinfo=UTC)
    assert period.label == "today (Mar 12)"


def test_weekly_period_runs_monday_to_sunday() -> None:
    period = weekly_period(WEDNESDAY)
    assert period.start == datetime(2025, 3, 10, tzinfo=UTC)
    assert period.end == datetime(2025, 3, 16, 23, 59, 59, 999000, tzinfo=UTC)
    assert period.label == "Mar 10 - Mar 16"


def test_weekly_period_on_sunday_stays_in_week() -> None:
    period = weekly_period(datetime(2025, 3, 16, 20, 0, tzinfo=UTC))
    assert period.start.date().isoformat() == "2025-03-10"


def test_weekly_label_across_months() -> None:
    assert weekly_period(datetime(2025, 3, 31, tzinfo=UTC)).label == "Mar 31 - Apr 6"


def test_periods_keep_local_timezone() -> None:
    now = datetime(2025, 3, 12, 8, 0, tzinfo=ZoneInfo("America/New_York"))
    period = daily_period(now)
    assert period.start.utcoffset() == timedelta(hours=-4)
    assert period.start.hour == 0
