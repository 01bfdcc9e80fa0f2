"""
Pure aggregation functions behind the daily dashboard.

Nothing here performs IO: every function takes already-fetched records and
returns new values. Absent amounts and counts count as zero.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from app.domain.models import (
    ZERO,
    AverageChange,
    DailyTotals,
    ShiftReportRecord,
    TrailingAverage,
)

HUNDRED = Decimal(100)


def aggregate_reports(
    reports: Sequence[ShiftReportRecord],
    day: date,
    shift_count: Optional[int] = None,
) -> DailyTotals:
    """
    Sum the report fields into one DailyTotals.

    Used for both the same-day aggregate and the single-report fallback; the
    fallback passes shift_count=1 explicitly. cash_variance is summed with its
    sign preserved.
    """
    return DailyTotals(
        day=day,
        shift_count=len(reports) if shift_count is None else shift_count,
        total_sales=sum((r.gross_sales_or_zero for r in reports), ZERO),
        fuel_sales=sum((r.fuel_sales_or_zero for r in reports), ZERO),
        inside_sales=sum((r.inside_sales_or_zero for r in reports), ZERO),
        cash_variance=sum((r.cash_variance_or_zero for r in reports), ZERO),
        customer_count=sum(r.transactions_or_zero for r in reports),
    )


def total_gross_sales(reports: Iterable[ShiftReportRecord]) -> Decimal:
    return sum((r.gross_sales_or_zero for r in reports), ZERO)


def compute_trailing_average(reports: Sequence[ShiftReportRecord]) -> TrailingAverage:
    """Mean gross sales and transactions per report; zeros when there are no reports."""
    count = len(reports)
    if count == 0:
        return TrailingAverage()

    customers = sum(r.transactions_or_zero for r in reports)
    return TrailingAverage(
        sales=total_gross_sales(reports) / count,
        customers=Decimal(customers) / count,
        report_count=count,
    )


def percent_change(current: Decimal | int, average: Decimal) -> Decimal:
    """(current - average) / average * 100, or 0 when the baseline is not positive."""
    if average <= 0:
        return ZERO
    return (Decimal(current) - average) / average * HUNDRED


def compute_average_change(totals: DailyTotals, average: TrailingAverage) -> AverageChange:
    return AverageChange(
        sales=percent_change(totals.total_sales, average.sales),
        customers=percent_change(totals.customer_count, average.customers),
    )
