"""
Data access repositories.
Persistence layer behind the service protocols.
"""

from .alert_repository import AlertRepository
from .shift_report_repository import ShiftReportRepository

__all__ = [
    "AlertRepository",
    "ShiftReportRepository",
]
