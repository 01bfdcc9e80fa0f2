"""
Domain services, kept apart from the routers.

Includes the dashboard snapshot builder, its pure aggregation helpers and
the shift-report analytics service.
"""

from .dashboard_service import DashboardService  # noqa: F401
from .dashboard_stats import (  # noqa: F401
    aggregate_reports,
    compute_average_change,
    compute_trailing_average,
    percent_change,
    total_gross_sales,
)
from .report_service import ReportService  # noqa: F401

__all__ = [
    "aggregate_reports",
    "compute_average_change",
    "compute_trailing_average",
    "DashboardService",
    "percent_change",
    "ReportService",
    "total_gross_sales",
]
