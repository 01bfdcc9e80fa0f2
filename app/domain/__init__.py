"""
Domain models and DTOs.
Domain layer, independent of infrastructure.
"""

from .models import (
    AlertSummary,
    AverageChange,
    CashVarianceDay,
    DailyTotals,
    DashboardSnapshot,
    FuelInsideDay,
    ShiftReportRecord,
    TrailingAverage,
)
from .filters import ReportFilters
from .windows import DashboardWindows

__all__ = [
    "AlertSummary",
    "AverageChange",
    "CashVarianceDay",
    "DailyTotals",
    "DashboardSnapshot",
    "DashboardWindows",
    "FuelInsideDay",
    "ReportFilters",
    "ShiftReportRecord",
    "TrailingAverage",
]
