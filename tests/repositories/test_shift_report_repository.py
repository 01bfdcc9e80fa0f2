"""Repository tests: SQL and row mapping, with the DB helpers stubbed out."""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from app.domain.filters import ReportFilters
from app.repositories import alert_repository, shift_report_repository
from app.repositories.alert_repository import AlertRepository
from app.repositories.shift_report_repository import ShiftReportRepository

UTC = timezone.utc


class QueryRecorder:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def __call__(self, sql, params=None, timeout_ms=None):
        self.calls.append((sql, params))
        return self.rows


@pytest.fixture
def recorder(monkeypatch):
    def install(rows, module=shift_report_repository, name="fetch_all"):
        rec = QueryRecorder(rows)
        monkeypatch.setattr(module, name, rec)
        return rec
    return install


def test_get_reports_maps_rows_to_records(recorder):
    rec = recorder([
        {
            "id": 7,
            "store_id": "s1",
            "report_date": datetime(2026, 10, 17, 8, 0),
            "gross_sales": Decimal("100.50"),
            "fuel_sales": 60.25,
            "inside_sales": None,
            "cash_variance": Decimal("-2.10"),
            "total_transactions": 12,
        }
    ])
    start = datetime(2026, 10, 17, tzinfo=UTC)
    end = datetime(2026, 10, 18, tzinfo=UTC)

    records = ShiftReportRepository.get_reports(ReportFilters("s1", start, end))

    sql, params = rec.calls[0]
    assert "FROM shift_reports r" in sql
    assert "r.report_date >= :start_date" in sql
    assert "r.report_date < :end_date" in sql
    assert sql.rstrip().endswith("ORDER BY r.report_date ASC")
    assert params == {"store_id": "s1", "start_date": start, "end_date": end}

    record = records[0]
    assert record.id == "7"
    assert record.report_date == datetime(2026, 10, 17, 8, 0, tzinfo=UTC)
    assert record.gross_sales == Decimal("100.50")
    assert record.fuel_sales == Decimal("60.25")
    assert record.inside_sales is None
    assert record.cash_variance == Decimal("-2.10")
    assert record.total_transactions == 12


def test_get_reports_keeps_absent_counts_absent(recorder):
    recorder([{
        "id": 1, "store_id": "s1", "report_date": datetime(2026, 10, 17, tzinfo=UTC),
        "gross_sales": None, "fuel_sales": None, "inside_sales": None,
        "cash_variance": None, "total_transactions": None,
    }])
    record = ShiftReportRepository.get_reports(ReportFilters("s1"))[0]
    assert record.total_transactions is None
    assert record.transactions_or_zero == 0


def test_get_latest_orders_newest_first(recorder):
    rec = recorder(None, name="fetch_one")

    assert ShiftReportRepository.get_latest("s1") is None
    sql, params = rec.calls[0]
    assert "ORDER BY r.report_date DESC LIMIT 1" in sql
    assert params == {"store_id": "s1"}


def test_get_latest_maps_row(recorder):
    recorder({
        "id": "abc", "store_id": "s1", "report_date": datetime(2026, 10, 14, 9, tzinfo=UTC),
        "gross_sales": "120", "fuel_sales": None, "inside_sales": None,
        "cash_variance": None, "total_transactions": 3,
    }, name="fetch_one")

    latest = ShiftReportRepository.get_latest("s1")
    assert latest.id == "abc"
    assert latest.gross_sales == Decimal("120")


def test_cash_variance_days_filters_nulls_in_sql(recorder):
    rec = recorder([
        {"report_date": datetime(2026, 10, 16, 22, 0), "cash_variance": -1.5},
    ])
    filters = ReportFilters("s1", datetime(2026, 10, 1, tzinfo=UTC), datetime(2026, 10, 17, tzinfo=UTC), True)

    rows = ShiftReportRepository.get_cash_variance_days(filters)

    sql, _ = rec.calls[0]
    assert "r.report_date <= :end_date" in sql
    assert "r.cash_variance IS NOT NULL" in sql
    assert "ORDER BY r.report_date DESC" in sql
    assert rows[0].day == date(2026, 10, 16)
    assert rows[0].cash_variance == Decimal("-1.5")


def test_fuel_vs_inside_zero_fills(recorder):
    recorder([
        {"report_date": datetime(2026, 10, 16, tzinfo=UTC), "fuel_sales": None, "inside_sales": 40},
    ])
    rows = ShiftReportRepository.get_fuel_vs_inside(ReportFilters("s1"))
    assert rows[0].fuel_sales == 0
    assert rows[0].inside_sales == Decimal("40")


def test_alert_repository_reads_unresolved_newest_first(recorder):
    rec = recorder(
        [{
            "id": 3, "store_id": "s1", "shift_id": None, "type": "CASH_VARIANCE",
            "severity": "HIGH", "title": "Cash short", "message": None,
            "created_at": datetime(2026, 10, 17, 10, 0), "resolved_at": None,
        }],
        module=alert_repository,
    )

    alerts = AlertRepository.get_unresolved("s1", limit=5)

    sql, params = rec.calls[0]
    assert "a.resolved_at IS NULL" in sql
    assert "ORDER BY a.created_at DESC" in sql
    assert params == {"store_id": "s1", "limit": 5}
    assert alerts[0].id == "3"
    assert alerts[0].created_at.tzinfo is UTC
    assert alerts[0].to_dict()["createdAt"] == "2026-10-17T10:00:00+00:00"
    assert alerts[0].to_dict()["resolvedAt"] is None
