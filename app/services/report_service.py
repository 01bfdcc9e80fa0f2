"""Shift-report analytics service."""

from __future__ import annotations

from datetime import datetime

from app.domain.filters import ReportFilters
from app.domain.models import CashVarianceDay, FuelInsideDay
from app.repositories.protocols import ShiftReportRepositoryProtocol
from app.repositories.shift_report_repository import ShiftReportRepository


class ReportService:
    """Service for per-report analytics over an inclusive date range."""

    def __init__(self, repository: ShiftReportRepositoryProtocol | None = None):
        """Initialize the service with a repository instance."""
        self.repository = repository or ShiftReportRepository()

    def get_cash_variance_days(
        self, store_id: str, start: datetime, end: datetime
    ) -> list[CashVarianceDay]:
        """Reports with a captured cash variance, newest first."""
        filters = ReportFilters(store_id, start, end, include_end=True)
        return self.repository.get_cash_variance_days(filters)

    def get_fuel_vs_inside(
        self, store_id: str, start: datetime, end: datetime
    ) -> list[FuelInsideDay]:
        """Fuel vs inside sales per report, oldest first."""
        filters = ReportFilters(store_id, start, end, include_end=True)
        return self.repository.get_fuel_vs_inside(filters)
