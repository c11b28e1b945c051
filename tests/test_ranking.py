"""Tests for the pure balance and ranking functions."""

from decimal import Decimal

import pytest

from tabungan.models import TransactionDirection, VerificationStatus
from tabungan.services.ranking import (
    deposit_count,
    net_balance,
    position_of,
    rank_classes,
    rank_students,
    verified_count,
)
from tabungan.services.records import ClassRecord, StudentRecord, TransactionRecord

DEPOSIT = TransactionDirection.DEPOSIT
WITHDRAWAL = TransactionDirection.WITHDRAWAL


def txn(student_id, amount, direction=DEPOSIT, status=VerificationStatus.VERIFIED):
    return TransactionRecord(student_id=student_id, direction=direction, amount=Decimal(amount), status=status)


def student(student_id, name, class_id=1, class_name="VII A"):
    return StudentRecord(student_id=student_id, name=name, class_id=class_id, class_name=class_name)


class TestNetBalance:
    def test_pending_deposit_is_ignored(self):
        transactions = [
            txn(1, "100000"),
            txn(1, "20000"),
            txn(1, "10000", WITHDRAWAL),
            txn(1, "50000", status=VerificationStatus.PENDING),
        ]
        assert net_balance(transactions) == Decimal("110000.00")

    def test_rejected_withdrawal_is_ignored(self):
        transactions = [txn(1, "5000"), txn(1, "5000", WITHDRAWAL, VerificationStatus.REJECTED)]
        assert net_balance(transactions) == Decimal("5000.00")

    def test_no_transactions_is_zero(self):
        assert net_balance([]) == Decimal("0.00")

    def test_negative_balance_is_kept(self):
        transactions = [txn(1, "1000"), txn(1, "2500.50", WITHDRAWAL)]
        assert net_balance(transactions) == Decimal("-1500.50")

    def test_cents_do_not_drift(self):
        transactions = [txn(1, "0.10") for _ in range(3)]
        assert net_balance(transactions) == Decimal("0.30")
        assert str(net_balance(transactions)) == "0.30"


class TestCounts:
    def test_deposit_count_ignores_withdrawals_and_unverified(self):
        transactions = [
            txn(1, "100"),
            txn(1, "100", WITHDRAWAL),
            txn(1, "100", status=VerificationStatus.PENDING),
            txn(1, "100", status=VerificationStatus.REJECTED),
        ]
        assert deposit_count(transactions) == 1
        assert verified_count(transactions) == 2


class TestRankStudents:
    def test_deposit_count_beats_balance(self):
        students = [student(1, "Ayu"), student(2, "Budi")]
        transactions = [
            txn(1, "50000"), txn(1, "30000"), txn(1, "25000"),
            txn(2, "60000"), txn(2, "50000"),
        ]
        ranking = rank_students(students, transactions)

        assert [(r.name, r.rank) for r in ranking] == [("Ayu", 1), ("Budi", 2)]
        assert ranking[0].deposit_count == 3
        assert ranking[0].net_balance == Decimal("105000.00")
        assert ranking[1].net_balance == Decimal("110000.00")

    def test_balance_breaks_count_ties(self):
        students = [student(1, "Ayu"), student(2, "Budi")]
        transactions = [txn(1, "1000"), txn(2, "2000")]
        assert [r.student_id for r in rank_students(students, transactions)] == [2, 1]

    def test_name_breaks_full_ties_case_sensitively(self):
        students = [student(1, "budi"), student(2, "Citra"), student(3, "Ayu")]
        ranking = rank_students(students, [])
        assert [r.name for r in ranking] == ["Ayu", "Citra", "budi"]
        assert [r.rank for r in ranking] == [1, 2, 3]

    def test_identical_names_fall_back_to_id(self):
        students = [student(9, "Dewi"), student(4, "Dewi")]
        assert [r.student_id for r in rank_students(students, [])] == [4, 9]

    def test_student_without_transactions_sorts_last(self):
        students = [student(1, "Andi"), student(2, "Zaki")]
        ranking = rank_students(students, [txn(2, "500")])
        assert ranking[-1].student_id == 1
        assert ranking[-1].deposit_count == 0
        assert ranking[-1].net_balance == Decimal("0.00")

    @pytest.mark.parametrize("limit, expected", [(1, 1), (3, 3), (10, 3), (None, 3)])
    def test_limit_truncates_without_padding(self, limit, expected):
        students = [student(1, "A"), student(2, "B"), student(3, "C")]
        ranking = rank_students(students, [], limit=limit)
        assert len(ranking) == expected
        assert [r.rank for r in ranking] == list(range(1, expected + 1))

    def test_unverified_transactions_do_not_move_ranking(self):
        students = [student(1, "Ayu"), student(2, "Budi")]
        transactions = [txn(2, "90000", status=VerificationStatus.PENDING)]
        assert [r.student_id for r in rank_students(students, transactions)] == [1, 2]

    def test_empty_input(self):
        assert rank_students([], []) == []


class TestRankClasses:
    def test_transaction_volume_orders_classes(self):
        classes = [ClassRecord(1, "X", "7"), ClassRecord(2, "Y", "8")]
        students = [student(1, "Ayu", 1, "X"), student(2, "Budi", 1, "X"), student(3, "Citra", 2, "Y")]
        transactions = [txn(1, "100"), txn(1, "100", WITHDRAWAL), txn(2, "100"), txn(3, "100")]

        ranking = rank_classes(classes, students, transactions, limit=1)

        assert len(ranking) == 1
        top = ranking[0]
        assert (top.class_id, top.rank, top.total_transactions, top.active_student_count) == (1, 1, 3, 2)

    def test_headcount_then_name_break_ties(self):
        classes = [ClassRecord(1, "VII B", "7"), ClassRecord(2, "VII A", "7"), ClassRecord(3, "VIII A", "8")]
        students = [student(1, "Ayu", 3, "VIII A"), student(2, "Budi", 3, "VIII A")]
        ranking = rank_classes(classes, students, [])
        assert [r.name for r in ranking] == ["VIII A", "VII A", "VII B"]

    def test_class_without_active_students_is_ranked(self):
        classes = [ClassRecord(1, "Kosong", "9")]
        ranking = rank_classes(classes, [], [])
        assert ranking[0].total_transactions == 0
        assert ranking[0].active_student_count == 0
        assert ranking[0].rank == 1

    def test_transactions_of_unlisted_students_are_ignored(self):
        classes = [ClassRecord(1, "X", "7")]
        ranking = rank_classes(classes, [student(1, "Ayu", 1, "X")], [txn(1, "10"), txn(99, "10")])
        assert ranking[0].total_transactions == 1


class TestPositionOf:
    def test_found_and_missing(self):
        ranking = rank_students([student(1, "A"), student(2, "B")], [txn(2, "1")])
        assert position_of(ranking, "student_id", 2) == 1
        assert position_of(ranking, "student_id", 1) == 2
        assert position_of(ranking, "student_id", 42) == 0


def test_transaction_record_requires_status():
    with pytest.raises(TypeError):
        TransactionRecord(student_id=1, direction=DEPOSIT, amount=Decimal("100"))
