"""Per-student savings figures."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .leaderboard_service import find_student_rank
from .ranking import deposit_count, net_balance
from .storage import SavingsStore


@dataclass(frozen=True)
class StudentSavingsSummary:
    student_id: int
    net_balance: Decimal
    deposit_count: int
    rank: int


def compute_net_balance(store: SavingsStore, student_id: int) -> Decimal:
    """Verified deposits minus verified withdrawals; zero without transactions."""

    return net_balance(store.list_verified_transactions(student_id))


def student_summary(store: SavingsStore, student_id: int) -> StudentSavingsSummary:
    transactions = store.list_verified_transactions(student_id)
    return StudentSavingsSummary(
        student_id=student_id,
        net_balance=net_balance(transactions),
        deposit_count=deposit_count(transactions),
        rank=find_student_rank(store, student_id),
    )
