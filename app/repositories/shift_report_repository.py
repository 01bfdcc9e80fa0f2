"""
Shift-report repository.
All SQL touching the shift_reports table lives here.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from app.core.config import settings
from app.domain.filters import ReportFilters
from app.domain.models import (
    CashVarianceDay,
    FuelInsideDay,
    ShiftReportRecord,
    ZERO,
)
from app.domain.windows import local_date
from app.infra.db import fetch_all, fetch_one

_REPORT_COLUMNS = """
    r.id,
    r.store_id,
    r.report_date,
    r.gross_sales,
    r.fuel_sales,
    r.inside_sales,
    r.cash_variance,
    r.total_transactions
"""


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(value))


def _to_aware(value: datetime) -> datetime:
    # timestamp columns without time zone are stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _row_to_record(row: dict) -> ShiftReportRecord:
    transactions = row.get("total_transactions")
    return ShiftReportRecord(
        id=str(row["id"]) if row.get("id") is not None else None,
        store_id=str(row["store_id"]),
        report_date=_to_aware(row["report_date"]),
        gross_sales=_to_decimal(row.get("gross_sales")),
        fuel_sales=_to_decimal(row.get("fuel_sales")),
        inside_sales=_to_decimal(row.get("inside_sales")),
        cash_variance=_to_decimal(row.get("cash_variance")),
        total_transactions=int(transactions) if transactions is not None else None,
    )


class ShiftReportRepository:
    """
    Data access for shift reports.
    Encapsulates the SQL; callers receive domain records only.
    """

    @staticmethod
    def get_reports(filters: ReportFilters) -> list[ShiftReportRecord]:
        """
        Reports of a store inside the filter range, oldest first.

        Args:
            filters: store and date range

        Returns:
            List of shift-report records
        """
        base_query = f"SELECT {_REPORT_COLUMNS} FROM shift_reports r"
        query, params = filters.apply_to_query(base_query)
        query += " ORDER BY r.report_date ASC"

        rows = fetch_all(query, params, timeout_ms=5000)
        return [_row_to_record(row) for row in rows]

    @staticmethod
    def get_latest(store_id: str) -> Optional[ShiftReportRecord]:
        """
        Most recent report of a store regardless of date.

        Returns:
            The newest record, or None when the store never reported
        """
        base_query = f"SELECT {_REPORT_COLUMNS} FROM shift_reports r"
        query, params = ReportFilters(store_id).apply_to_query(base_query)
        query += " ORDER BY r.report_date DESC LIMIT 1"

        row = fetch_one(query, params, timeout_ms=2000)
        return _row_to_record(row) if row else None

    @staticmethod
    def get_cash_variance_days(filters: ReportFilters) -> list[CashVarianceDay]:
        """
        Reports with a captured cash variance, newest first.

        Args:
            filters: store and date range (usually inclusive of end_date)

        Returns:
            One entry per report
        """
        base_query = """
            SELECT r.report_date, r.cash_variance
            FROM shift_reports r
        """
        query, params = filters.apply_to_query(base_query)
        query += " AND r.cash_variance IS NOT NULL ORDER BY r.report_date DESC"

        rows = fetch_all(query, params, timeout_ms=5000)
        tz = settings.dashboard_tz
        return [
            CashVarianceDay(
                day=local_date(_to_aware(row["report_date"]), tz),
                cash_variance=_to_decimal(row["cash_variance"]),
            )
            for row in rows
        ]

    @staticmethod
    def get_fuel_vs_inside(filters: ReportFilters) -> list[FuelInsideDay]:
        """
        Fuel and inside sales per report, oldest first.

        Args:
            filters: store and date range

        Returns:
            One entry per report, absent amounts as zero
        """
        base_query = """
            SELECT r.report_date, r.fuel_sales, r.inside_sales
            FROM shift_reports r
        """
        query, params = filters.apply_to_query(base_query)
        query += " ORDER BY r.report_date ASC"

        rows = fetch_all(query, params, timeout_ms=5000)
        tz = settings.dashboard_tz
        return [
            FuelInsideDay(
                day=local_date(_to_aware(row["report_date"]), tz),
                fuel_sales=_to_decimal(row.get("fuel_sales")) or ZERO,
                inside_sales=_to_decimal(row.get("inside_sales")) or ZERO,
            )
            for row in rows
        ]
