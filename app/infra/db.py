from __future__ import annotations
from typing import Any, Dict, List, Optional
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, Result
from app.core.config import settings
from app.core.logging import db_logger

# -----------------------------------------------------------------------------
# 1) Engine (connection pool)
# -----------------------------------------------------------------------------

_engine: Optional[Engine] = None

def get_engine() -> Engine:
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.DATABASE_URL,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
            future=True,
        )
        db_logger.info("Database engine created", dialect=_engine.dialect.name)
    return _engine

# -----------------------------------------------------------------------------
# 2) Healthcheck (for /readyz)
# -----------------------------------------------------------------------------

def health_check() -> Dict[str, Any]:
    eng = get_engine()
    with eng.connect() as conn:
        conn.execute(text("SELECT 1"))

        db = conn.execute(text("SELECT current_database()")).scalar()
        user = conn.execute(text("SELECT current_user")).scalar_one()
        return {
            "ok": True,
            "database": db,
            "user": user,
        }

# -----------------------------------------------------------------------------
# 3) Query helpers (SELECT)
# -----------------------------------------------------------------------------

def fetch_all(sql: str, params: Optional[Dict[str, Any]] = None,
              timeout_ms: Optional[int] = None) -> List[Dict[str, Any]]:
    eng = get_engine()
    with eng.begin() as conn:
        if timeout_ms:
            conn.execute(text(f"SET LOCAL statement_timeout = {int(timeout_ms)}"))
        result: Result = conn.execute(text(sql), params or {})
        rows = result.mappings().all()
        return [dict(r) for r in rows]

def fetch_one(sql: str, params: Optional[Dict[str, Any]] = None,
              timeout_ms: Optional[int] = None) -> Optional[Dict[str, Any]]:
    rows = fetch_all(sql, params=params, timeout_ms=timeout_ms)
    return rows[0] if rows else None
