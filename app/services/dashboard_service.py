"""Dashboard business logic service."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from app.core.config import settings
from app.core.logging import dashboard_logger
from app.domain.models import AlertSummary, DailyTotals, DashboardSnapshot
from app.domain.windows import DashboardWindows, local_date
from app.repositories.alert_repository import AlertRepository
from app.repositories.protocols import (
    AlertRepositoryProtocol,
    ShiftReportRepositoryProtocol,
)
from app.repositories.shift_report_repository import ShiftReportRepository
from app.services.dashboard_stats import (
    aggregate_reports,
    compute_average_change,
    compute_trailing_average,
    total_gross_sales,
)


class DashboardService:
    """
    Builds the "today" snapshot of a store.

    Repository errors are not caught here; they reach the caller unchanged.
    """

    def __init__(
        self,
        reports: ShiftReportRepositoryProtocol | None = None,
        alerts: AlertRepositoryProtocol | None = None,
        *,
        tz=None,
        trend_days: int | None = None,
        alert_limit: int | None = None,
    ):
        self.reports = reports or ShiftReportRepository()
        self.alerts = alerts or AlertRepository()
        self.tz = tz or settings.dashboard_tz
        self.trend_days = settings.DASHBOARD_TREND_DAYS if trend_days is None else trend_days
        self.alert_limit = settings.DASHBOARD_ALERT_LIMIT if alert_limit is None else alert_limit

    def get_today_stats(
        self, store_id: str, now: Optional[datetime] = None
    ) -> DashboardSnapshot | None:
        """
        Today's snapshot for a store, or None when the store has no reports at all.

        Same-day reports are aggregated; without any, the latest report of any
        date stands in with shift_count=1 and its own date.
        """
        windows = DashboardWindows.from_now(
            now or datetime.now(timezone.utc), self.tz, self.trend_days
        )

        totals = self._today_totals(store_id, windows)
        if totals is None:
            dashboard_logger.info("No shift reports for store", store_id=store_id)
            return None

        trend_reports = self.reports.get_reports(windows.trend_filters(store_id))
        average_change = compute_average_change(totals, compute_trailing_average(trend_reports))

        month_reports = self.reports.get_reports(windows.month_filters(store_id))
        monthly_sales = total_gross_sales(month_reports)

        return DashboardSnapshot.from_totals(
            totals,
            monthly_sales=monthly_sales,
            average_change=average_change,
        )

    def _today_totals(self, store_id: str, windows: DashboardWindows) -> DailyTotals | None:
        today_reports = self.reports.get_reports(windows.today_filters(store_id))
        if today_reports:
            return aggregate_reports(today_reports, windows.today)

        latest = self.reports.get_latest(store_id)
        if latest is None:
            return None

        dashboard_logger.debug(
            "No reports today, falling back to latest report",
            store_id=store_id,
            report_date=latest.report_date.isoformat(),
        )
        return aggregate_reports(
            [latest], local_date(latest.report_date, self.tz), shift_count=1
        )

    def get_alerts(self, store_id: str, limit: int | None = None) -> list[AlertSummary]:
        """Most recent unresolved alerts of the store, newest first."""
        return self.alerts.get_unresolved(
            store_id, self.alert_limit if limit is None else limit
        )
