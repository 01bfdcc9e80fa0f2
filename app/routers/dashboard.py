"""Dashboard endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from app.core.cache import etag_json
from app.core.logging import api_logger
from app.core.security import AccessClaims, ensure_store_access, require_roles
from app.services.dashboard_service import DashboardService
from app.services.dependencies import get_dashboard_service


router = APIRouter(prefix="/dashboard", tags=["dashboard"])

NO_DATA_MESSAGE = "No data available"


@router.get("/today")
def get_today_stats(
    request: Request,
    store_id: Optional[str] = Query(None, alias="storeId", description="Store identifier"),
    user: AccessClaims = Depends(require_roles("viewer", "manager", "owner", "admin")),
    service: DashboardService = Depends(get_dashboard_service),
) -> Response:
    """Today's aggregated stats for a store, plus its latest unresolved alerts."""
    if not store_id:
        return JSONResponse(
            status_code=400,
            content={"error": {"code": "INVALID_INPUT", "message": "Store ID is required"}},
        )

    ensure_store_access(user, store_id)

    stats = service.get_today_stats(store_id)
    if stats is None:
        return etag_json(request, {"stats": None, "message": NO_DATA_MESSAGE})

    alerts = service.get_alerts(store_id)
    api_logger.debug(
        "Dashboard stats served",
        store_id=store_id,
        shift_count=stats.shift_count,
        alerts=len(alerts),
    )
    return etag_json(
        request,
        {
            "stats": stats.to_dict(),
            "alerts": [alert.to_dict() for alert in alerts],
        },
    )
