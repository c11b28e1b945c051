"""Tests for report aggregates."""

from datetime import datetime
from decimal import Decimal

import pytest

from tabungan.models import StudentStatus, TransactionDirection, VerificationStatus
from tabungan.services import report_service
from tabungan.services.report_service import ReportRuleViolation

WITHDRAWAL = TransactionDirection.WITHDRAWAL


@pytest.fixture
def school(seed):
    x = seed.school_class("X")
    y = seed.school_class("Y")
    ayu = seed.student("Ayu", x)
    budi = seed.student("Budi", x)
    citra = seed.student("Citra", y)
    lulus = seed.student("Lulus", y, status=StudentStatus.GRADUATED)

    seed.txn(ayu, "10000", when=datetime(2025, 1, 15))
    seed.txn(ayu, "2500.50", WITHDRAWAL, when=datetime(2025, 2, 3))
    seed.txn(budi, "5000", when=datetime(2025, 2, 20))
    seed.txn(budi, "7000", status=VerificationStatus.PENDING, when=datetime(2025, 2, 21))
    seed.txn(citra, "3000", status=VerificationStatus.REJECTED, when=datetime(2025, 3, 1))
    seed.txn(lulus, "8000", when=datetime(2024, 12, 30))
    return {"x": x, "y": y, "ayu": ayu, "budi": budi, "citra": citra}


class TestSummarize:
    def test_all_time(self, store, school):
        summary = report_service.summarize(store)

        assert summary.total_transactions == 4
        assert summary.total_deposits == Decimal("23000.00")
        assert summary.total_withdrawals == Decimal("2500.50")
        assert summary.active_student_count == 3
        # Ayu 7499.50 and Budi 5000.00; Citra has no verified rows, Lulus is not active.
        assert summary.average_net_savings == Decimal("6249.75")

    def test_date_range_and_class(self, store, school):
        summary = report_service.summarize(
            store,
            start=datetime(2025, 2, 1),
            end=datetime(2025, 2, 28, 23, 59),
            class_id=school["x"].class_id,
        )

        assert summary.total_transactions == 2
        assert summary.total_deposits == Decimal("5000.00")
        assert summary.total_withdrawals == Decimal("2500.50")
        assert summary.active_student_count == 2
        assert summary.average_net_savings == Decimal("1249.75")

    def test_class_without_verified_activity(self, store, school):
        summary = report_service.summarize(store, class_id=school["y"].class_id)

        assert summary.total_transactions == 1
        assert summary.active_student_count == 1
        assert summary.average_net_savings == Decimal("0.00")

    def test_empty_database(self, store):
        summary = report_service.summarize(store)
        assert summary.total_transactions == 0
        assert summary.total_deposits == Decimal("0.00")
        assert summary.active_student_count == 0
        assert summary.average_net_savings == Decimal("0.00")

    def test_inverted_range_rejected(self, store):
        with pytest.raises(ReportRuleViolation):
            report_service.summarize(store, start=datetime(2025, 3, 1), end=datetime(2025, 2, 1))


class TestMonthlyReport:
    def test_months_with_activity_in_order(self, store, school):
        rows = report_service.monthly_report(store, year=2025)

        assert [(r.month, r.month_name) for r in rows] == [(1, "Januari"), (2, "Februari")]
        february = rows[1]
        assert february.year == 2025
        assert february.total_transactions == 2
        assert february.total_deposits == Decimal("5000.00")
        assert february.total_withdrawals == Decimal("2500.50")

    def test_class_filter_and_other_year(self, store, school):
        assert report_service.monthly_report(store, year=2025, class_id=school["y"].class_id) == []

        rows = report_service.monthly_report(store, year=2024)
        assert [(r.month_name, r.total_deposits) for r in rows] == [("Desember", Decimal("8000.00"))]
