from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import app_logger
from app.infra.db import health_check

router = APIRouter(tags=["health"])

@router.get("/healthz")
def healthz():
    return {"status": "ok"}

@router.get("/readyz")
def readyz():
    try:
        db_status = health_check()
    except SQLAlchemyError as exc:
        app_logger.error("Readiness check failed", exc=exc)
        return JSONResponse(
            status_code=503,
            content={"status": "not ready", "error": "database unavailable"},
        )
    return {"status": "ready", "database": db_status}
