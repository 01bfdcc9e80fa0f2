"""Shift-report analytics endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from app.core.config import settings
from app.core.security import AccessClaims, ensure_store_access, require_roles
from app.services.dependencies import get_report_service
from app.services.report_service import ReportService


router = APIRouter(prefix="/reports", tags=["reports"])


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def _parse_iso8601(value: str) -> datetime:
    """Parse ISO8601 strings (accepting a Z suffix) and normalize to UTC."""
    try:
        normalized = value.replace("Z", "+00:00")
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date/time: {value}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _default_period(days: int) -> tuple[datetime, datetime]:
    """Default range: the last *days* days, in UTC."""
    now = datetime.now(timezone.utc)
    start = (now - timedelta(days=days)).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, now


def _resolve_period(start: Optional[str], end: Optional[str]) -> tuple[datetime, datetime]:
    if bool(start) != bool(end):
        raise HTTPException(status_code=400, detail="start and end must be provided together")
    if start and end:
        start_dt, end_dt = _parse_iso8601(start), _parse_iso8601(end)
        if start_dt > end_dt:
            raise HTTPException(status_code=400, detail="start must not be after end")
        return start_dt, end_dt
    return _default_period(settings.REPORTS_DEFAULT_DAYS)


# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------


class CashVarianceRow(BaseModel):
    """Cash variance response model."""
    date: str
    cashVariance: float


class FuelVsInsideRow(BaseModel):
    """Fuel vs inside sales response model."""
    date: str
    fuelSales: float
    insideSales: float
    fuelSharePct: float


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------


@router.get("/cash-variance", response_model=list[CashVarianceRow])
def get_cash_variance(
    store_id: str = Query(..., alias="storeId", description="Store identifier"),
    start: Optional[str] = Query(None, description="Start date/time (ISO8601)"),
    end: Optional[str] = Query(None, description="End date/time (ISO8601)"),
    user: AccessClaims = Depends(require_roles("viewer", "manager", "owner", "admin")),
    service: ReportService = Depends(get_report_service),
):
    """Days with a captured cash variance, newest first."""
    ensure_store_access(user, store_id)
    start_dt, end_dt = _resolve_period(start, end)

    return [
        CashVarianceRow(date=row.day_iso, cashVariance=float(row.cash_variance))
        for row in service.get_cash_variance_days(store_id, start_dt, end_dt)
    ]


@router.get("/fuel-vs-inside", response_model=list[FuelVsInsideRow])
def get_fuel_vs_inside(
    store_id: str = Query(..., alias="storeId", description="Store identifier"),
    start: Optional[str] = Query(None, description="Start date/time (ISO8601)"),
    end: Optional[str] = Query(None, description="End date/time (ISO8601)"),
    user: AccessClaims = Depends(require_roles("viewer", "manager", "owner", "admin")),
    service: ReportService = Depends(get_report_service),
):
    """Fuel vs inside sales per report, oldest first."""
    ensure_store_access(user, store_id)
    start_dt, end_dt = _resolve_period(start, end)

    return [
        FuelVsInsideRow(
            date=row.day_iso,
            fuelSales=float(row.fuel_sales),
            insideSales=float(row.inside_sales),
            fuelSharePct=round(row.fuel_share, 2),
        )
        for row in service.get_fuel_vs_inside(store_id, start_dt, end_dt)
    ]
