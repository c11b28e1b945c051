"""Pure balance aggregation and leaderboard ordering.

Every function here works on an in-memory snapshot and never touches the
database. Only verified transactions are counted; anything else in the input
is ignored, so callers may pass unfiltered transaction lists.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from ..models.enums import TransactionDirection
from .records import ClassRecord, RankedClass, RankedStudent, StudentRecord, TransactionRecord

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

T = TypeVar("T")


def net_balance(transactions: Iterable[TransactionRecord]) -> Decimal:
    """Verified deposits minus verified withdrawals, to two decimal places."""

    total = ZERO
    for txn in transactions:
        if not txn.is_verified:
            continue
        if txn.direction is TransactionDirection.DEPOSIT:
            total += txn.amount
        else:
            total -= txn.amount
    return total.quantize(CENTS)


def deposit_count(transactions: Iterable[TransactionRecord]) -> int:
    return sum(
        1 for txn in transactions if txn.is_verified and txn.direction is TransactionDirection.DEPOSIT
    )


def verified_count(transactions: Iterable[TransactionRecord]) -> int:
    return sum(1 for txn in transactions if txn.is_verified)


def group_by_student(transactions: Iterable[TransactionRecord]) -> Dict[int, List[TransactionRecord]]:
    grouped: Dict[int, List[TransactionRecord]] = defaultdict(list)
    for txn in transactions:
        grouped[txn.student_id].append(txn)
    return grouped


def _truncate(items: List[T], limit: Optional[int]) -> List[T]:
    if limit is None:
        return items
    return items[: max(limit, 0)]


def rank_students(
    students: Sequence[StudentRecord],
    transactions: Iterable[TransactionRecord],
    *,
    limit: Optional[int] = None,
) -> List[RankedStudent]:
    """Order students by deposit count, then net balance, then name.

    ``students`` is expected to hold active students only. Students with
    identical names are ordered by ascending id. Ranks are positional and
    never shared between ties.
    """

    by_student = group_by_student(transactions)
    rows = []
    for student in students:
        own = by_student.get(student.student_id, [])
        rows.append((student, deposit_count(own), net_balance(own)))

    rows.sort(key=lambda row: (-row[1], -row[2], row[0].name, row[0].student_id))

    ranked = [
        RankedStudent(
            student_id=student.student_id,
            name=student.name,
            class_name=student.class_name,
            net_balance=balance,
            deposit_count=count,
            rank=position,
        )
        for position, (student, count, balance) in enumerate(rows, start=1)
    ]
    return _truncate(ranked, limit)


def rank_classes(
    classes: Sequence[ClassRecord],
    students: Sequence[StudentRecord],
    transactions: Iterable[TransactionRecord],
    *,
    limit: Optional[int] = None,
) -> List[RankedClass]:
    """Order classes by verified transaction volume, then active headcount, then name.

    Classes without active students still take part with zero counts.
    Transactions of students missing from ``students`` (inactive or
    graduated) do not count toward any class.
    """

    class_of_student = {student.student_id: student.class_id for student in students}

    headcount: Dict[int, int] = defaultdict(int)
    for student in students:
        headcount[student.class_id] += 1

    volume: Dict[int, int] = defaultdict(int)
    for txn in transactions:
        if not txn.is_verified:
            continue
        class_id = class_of_student.get(txn.student_id)
        if class_id is not None:
            volume[class_id] += 1

    ordered = sorted(
        classes,
        key=lambda cls: (-volume[cls.class_id], -headcount[cls.class_id], cls.name, cls.class_id),
    )

    ranked = [
        RankedClass(
            class_id=cls.class_id,
            name=cls.name,
            level=cls.level,
            total_transactions=volume[cls.class_id],
            active_student_count=headcount[cls.class_id],
            rank=position,
        )
        for position, cls in enumerate(ordered, start=1)
    ]
    return _truncate(ranked, limit)


def position_of(ranking: Sequence[object], attribute: str, identity: int) -> int:
    """Return the 1-based rank of ``identity`` in ``ranking`` or 0 when absent."""

    for entry in ranking:
        if getattr(entry, attribute) == identity:
            return entry.rank
    return 0
