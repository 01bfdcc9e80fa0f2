"""Calendar windows the dashboard reads from, computed in the store timezone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from app.domain.filters import ReportFilters


def local_midnight(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=tz)


def to_local(moment: datetime, tz: tzinfo) -> datetime:
    """Aware datetime in tz; naive values are taken as already local."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def local_date(moment: datetime, tz: tzinfo) -> date:
    return to_local(moment, tz).date()


@dataclass(frozen=True)
class DashboardWindows:
    """
    Boundaries for one dashboard computation.

    - today: [day_start, day_end), local midnight to next local midnight
    - trend: [trend_start, trend_end), the trailing N days ending at now
    - month: [month_start, ...), first of the month at local midnight, no upper bound
    """

    now: datetime
    today: date
    day_start: datetime
    day_end: datetime
    trend_start: datetime
    trend_end: datetime
    month_start: datetime

    @classmethod
    def from_now(cls, now: datetime, tz: tzinfo, trend_days: int = 7) -> DashboardWindows:
        now = to_local(now, tz)
        today = now.date()
        return cls(
            now=now,
            today=today,
            day_start=local_midnight(today, tz),
            day_end=local_midnight(today + timedelta(days=1), tz),
            trend_start=now - timedelta(days=trend_days),
            trend_end=now,
            month_start=local_midnight(today.replace(day=1), tz),
        )

    def today_filters(self, store_id: str) -> ReportFilters:
        return ReportFilters(store_id, self.day_start, self.day_end)

    def trend_filters(self, store_id: str) -> ReportFilters:
        return ReportFilters(store_id, self.trend_start, self.trend_end)

    def month_filters(self, store_id: str) -> ReportFilters:
        return ReportFilters(store_id, self.month_start)
