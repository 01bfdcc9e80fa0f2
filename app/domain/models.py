"""
Domain models and DTOs.
Business concepts independent of infrastructure. Money is always Decimal.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

ZERO = Decimal(0)


def _or_zero(value: Optional[Decimal]) -> Decimal:
    return ZERO if value is None else value


@dataclass(frozen=True)
class ShiftReportRecord:
    """Shift report as submitted by a store. Absent amounts mean "not captured"."""

    store_id: str
    report_date: datetime
    gross_sales: Optional[Decimal] = None
    fuel_sales: Optional[Decimal] = None
    inside_sales: Optional[Decimal] = None
    cash_variance: Optional[Decimal] = None
    total_transactions: Optional[int] = None
    id: Optional[str] = None

    @property
    def gross_sales_or_zero(self) -> Decimal:
        return _or_zero(self.gross_sales)

    @property
    def fuel_sales_or_zero(self) -> Decimal:
        return _or_zero(self.fuel_sales)

    @property
    def inside_sales_or_zero(self) -> Decimal:
        return _or_zero(self.inside_sales)

    @property
    def cash_variance_or_zero(self) -> Decimal:
        return _or_zero(self.cash_variance)

    @property
    def transactions_or_zero(self) -> int:
        return self.total_transactions or 0


@dataclass(frozen=True)
class DailyTotals:
    """Totals for one reported day (same-day aggregate or a single fallback report)."""

    day: date
    shift_count: int
    total_sales: Decimal = ZERO
    fuel_sales: Decimal = ZERO
    inside_sales: Decimal = ZERO
    cash_variance: Decimal = ZERO
    customer_count: int = 0


@dataclass(frozen=True)
class TrailingAverage:
    """Per-report averages over the trailing window."""

    sales: Decimal = ZERO
    customers: Decimal = ZERO
    report_count: int = 0


@dataclass(frozen=True)
class AverageChange:
    """
    Signed percentage deltas against the trailing average.
    A value of 0 also stands for "no baseline", so it does not imply "no change".
    """

    sales: Decimal = ZERO
    customers: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {"sales": self.sales, "customers": self.customers}


@dataclass(frozen=True)
class DashboardSnapshot:
    """Today's statistics for one store. Computed per request, never persisted."""

    date: date
    shift_count: int
    total_sales: Decimal
    fuel_sales: Decimal
    inside_sales: Decimal
    customer_count: int
    cash_variance: Decimal
    monthly_sales: Decimal
    average_change: AverageChange = field(default_factory=AverageChange)

    @classmethod
    def from_totals(
        cls,
        totals: DailyTotals,
        *,
        monthly_sales: Decimal,
        average_change: AverageChange,
    ) -> "DashboardSnapshot":
        return cls(
            date=totals.day,
            shift_count=totals.shift_count,
            total_sales=totals.total_sales,
            fuel_sales=totals.fuel_sales,
            inside_sales=totals.inside_sales,
            customer_count=totals.customer_count,
            cash_variance=totals.cash_variance,
            monthly_sales=monthly_sales,
            average_change=average_change,
        )

    def to_dict(self) -> dict[str, Any]:
        """Wire representation (camelCase keys, ISO date)."""
        return {
            "date": self.date.isoformat(),
            "shiftCount": self.shift_count,
            "totalSales": self.total_sales,
            "fuelSales": self.fuel_sales,
            "insideSales": self.inside_sales,
            "customerCount": self.customer_count,
            "cashVariance": self.cash_variance,
            "monthlySales": self.monthly_sales,
            "averageChange": self.average_change.to_dict(),
        }


@dataclass(frozen=True)
class AlertSummary:
    """Alert raised for a store; unresolved while resolved_at is None."""

    id: str
    store_id: str
    type: str
    severity: str
    title: str
    created_at: datetime
    message: Optional[str] = None
    shift_id: Optional[str] = None
    resolved_at: Optional[datetime] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_at is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "storeId": self.store_id,
            "shiftId": self.shift_id,
            "type": self.type,
            "severity": self.severity,
            "title": self.title,
            "message": self.message,
            "createdAt": self.created_at.isoformat(),
            "resolvedAt": self.resolved_at.isoformat() if self.resolved_at else None,
        }


@dataclass(frozen=True)
class CashVarianceDay:
    """Captured cash variance of one report."""

    day: date
    cash_variance: Decimal

    @property
    def day_iso(self) -> str:
        return self.day.isoformat()


@dataclass(frozen=True)
class FuelInsideDay:
    """Fuel vs inside sales split of one report."""

    day: date
    fuel_sales: Decimal = ZERO
    inside_sales: Decimal = ZERO

    @property
    def day_iso(self) -> str:
        return self.day.isoformat()

    @property
    def fuel_share(self) -> float:
        """Fuel share of the combined total, in percent."""
        total = self.fuel_sales + self.inside_sales
        if total == 0:
            return 0.0
        return float(self.fuel_sales / total * 100)
