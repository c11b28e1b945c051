"""Savings report aggregates over verified transactions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.enums import TransactionDirection
from ..utils.datetime import month_name, to_naive_utc
from .ranking import CENTS, ZERO, group_by_student, net_balance
from .records import TransactionRecord
from .storage import SavingsStore


class ReportRuleViolation(Exception):
    """Raised when report parameters are inconsistent."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


@dataclass(frozen=True)
class ReportSummary:
    total_transactions: int
    total_deposits: Decimal
    total_withdrawals: Decimal
    active_student_count: int
    average_net_savings: Decimal


@dataclass(frozen=True)
class MonthlyReport:
    year: int
    month: int
    month_name: str
    total_transactions: int
    total_deposits: Decimal
    total_withdrawals: Decimal


def _direction_totals(transactions: Iterable[TransactionRecord]) -> Tuple[int, Decimal, Decimal]:
    count, deposits, withdrawals = 0, ZERO, ZERO
    for txn in transactions:
        count += 1
        if txn.direction is TransactionDirection.DEPOSIT:
            deposits += txn.amount
        else:
            withdrawals += txn.amount
    return count, deposits.quantize(CENTS), withdrawals.quantize(CENTS)


def summarize(
    store: SavingsStore,
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    class_id: Optional[int] = None,
) -> ReportSummary:
    """Totals for verified transactions in an optional date range and class.

    The average net savings is taken over active students that have at least
    one verified transaction in the range.
    """

    if start is not None and end is not None and to_naive_utc(start) > to_naive_utc(end):
        raise ReportRuleViolation("start_date must not be later than end_date.")

    transactions = store.list_dated_transactions(start=start, end=end, class_id=class_id)
    count, deposits, withdrawals = _direction_totals(transactions)

    active_ids = {
        student.student_id
        for student in store.list_active_students()
        if class_id is None or student.class_id == class_id
    }
    balances = [
        net_balance(own) for student_id, own in group_by_student(transactions).items() if student_id in active_ids
    ]
    average = ZERO
    if balances:
        average = (sum(balances, ZERO) / len(balances)).quantize(CENTS, rounding=ROUND_HALF_UP)

    return ReportSummary(
        total_transactions=count,
        total_deposits=deposits,
        total_withdrawals=withdrawals,
        active_student_count=len(active_ids),
        average_net_savings=average,
    )


def monthly_report(store: SavingsStore, *, year: int, class_id: Optional[int] = None) -> List[MonthlyReport]:
    """Per-month totals for ``year``; months without transactions are omitted."""

    transactions = store.list_dated_transactions(
        start=datetime(year, 1, 1),
        end=datetime(year, 12, 31, 23, 59, 59, 999999),
        class_id=class_id,
    )

    by_month: Dict[int, List[TransactionRecord]] = defaultdict(list)
    for txn in transactions:
        by_month[txn.transaction_date.month].append(txn)

    rows = []
    for month in sorted(by_month):
        count, deposits, withdrawals = _direction_totals(by_month[month])
        rows.append(
            MonthlyReport(
                year=year,
                month=month,
                month_name=month_name(month),
                total_transactions=count,
                total_deposits=deposits,
                total_withdrawals=withdrawals,
            )
        )
    return rows
