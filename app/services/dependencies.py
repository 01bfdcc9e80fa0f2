"""FastAPI dependency providers for service layer."""

from app.repositories.alert_repository import AlertRepository
from app.repositories.shift_report_repository import ShiftReportRepository
from app.services.dashboard_service import DashboardService
from app.services.report_service import ReportService


def get_dashboard_service() -> DashboardService:
    return DashboardService(ShiftReportRepository(), AlertRepository())


def get_report_service() -> ReportService:
    return ReportService(ShiftReportRepository())
