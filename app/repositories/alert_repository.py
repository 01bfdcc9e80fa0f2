"""
Alert repository.
Read-only access to the alerts table.
"""

from datetime import datetime, timezone
from typing import Optional

from app.domain.models import AlertSummary
from app.infra.db import fetch_all


def _to_aware(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AlertRepository:
    """Data access for store alerts."""

    @staticmethod
    def get_unresolved(store_id: str, limit: int = 5) -> list[AlertSummary]:
        """
        Unresolved alerts of a store, most recent first.

        Args:
            store_id: store identifier
            limit: maximum number of alerts

        Returns:
            List of alert summaries
        """
        query = """
            SELECT a.id, a.store_id, a.shift_id, a.type, a.severity,
                   a.title, a.message, a.created_at, a.resolved_at
            FROM alerts a
            WHERE a.store_id = :store_id
              AND a.resolved_at IS NULL
            ORDER BY a.created_at DESC
            LIMIT :limit
        """
        rows = fetch_all(query, {"store_id": store_id, "limit": int(limit)}, timeout_ms=2000)

        return [
            AlertSummary(
                id=str(row["id"]),
                store_id=str(row["store_id"]),
                shift_id=str(row["shift_id"]) if row.get("shift_id") is not None else None,
                type=row["type"],
                severity=row["severity"],
                title=row["title"],
                message=row.get("message"),
                created_at=_to_aware(row["created_at"]),
                resolved_at=_to_aware(row.get("resolved_at")),
            )
            for row in rows
        ]
