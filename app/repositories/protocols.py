"""Repository protocol definitions used by domain services."""

from __future__ import annotations

from typing import Optional, Protocol

from app.domain.filters import ReportFilters
from app.domain.models import (
    AlertSummary,
    CashVarianceDay,
    FuelInsideDay,
    ShiftReportRecord,
)


class ShiftReportRepositoryProtocol(Protocol):
    """Contract for shift-report data access."""

    def get_reports(self, filters: ReportFilters) -> list[ShiftReportRecord]: ...

    def get_latest(self, store_id: str) -> Optional[ShiftReportRecord]: ...

    def get_cash_variance_days(self, filters: ReportFilters) -> list[CashVarianceDay]: ...

    def get_fuel_vs_inside(self, filters: ReportFilters) -> list[FuelInsideDay]: ...


class AlertRepositoryProtocol(Protocol):
    """Contract for alert data access."""

    def get_unresolved(self, store_id: str, limit: int = 5) -> list[AlertSummary]: ...
