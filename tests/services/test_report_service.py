from datetime import date, timedelta
from decimal import Decimal

from conftest import NOW, STORE_ID, FakeShiftReportRepository, make_report

from app.services.report_service import ReportService


def test_cash_variance_days_skip_uncaptured_and_are_newest_first():
    repo = FakeShiftReportRepository([
        make_report(NOW - timedelta(days=3), variance="-4.20"),
        make_report(NOW - timedelta(days=2), variance=None),
        make_report(NOW - timedelta(days=1), variance="0"),
    ])
    rows = ReportService(repo).get_cash_variance_days(STORE_ID, NOW - timedelta(days=10), NOW)

    assert [r.day for r in rows] == [date(2026, 10, 16), date(2026, 10, 14)]
    assert rows[0].cash_variance == Decimal("0")
    assert rows[1].cash_variance == Decimal("-4.20")


def test_range_end_is_inclusive():
    repo = FakeShiftReportRepository([make_report(NOW, fuel="10", inside="5")])
    rows = ReportService(repo).get_fuel_vs_inside(STORE_ID, NOW - timedelta(days=1), NOW)
    assert len(rows) == 1


def test_fuel_vs_inside_defaults_absent_amounts():
    repo = FakeShiftReportRepository([
        make_report(NOW - timedelta(days=1), fuel="300", inside="100"),
        make_report(NOW - timedelta(days=2), fuel=None, inside="80"),
    ])
    rows = ReportService(repo).get_fuel_vs_inside(STORE_ID, NOW - timedelta(days=7), NOW)

    assert [r.day_iso for r in rows] == ["2026-10-15", "2026-10-16"]
    assert rows[0].fuel_sales == 0
    assert rows[0].fuel_share == 0.0
    assert rows[1].fuel_share == 75.0
