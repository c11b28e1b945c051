"""Leaderboard aggregation services."""

from __future__ import annotations

from typing import List

from .ranking import position_of, rank_classes, rank_students
from .records import RankedClass, RankedStudent
from .storage import SavingsStore

DEFAULT_LIMIT = 10


def compute_student_leaderboard(store: SavingsStore, *, limit: int = DEFAULT_LIMIT) -> List[RankedStudent]:
    """Return active students ordered by verified deposit count, balance and name."""

    return rank_students(store.list_active_students(), store.list_verified_transactions(), limit=limit)


def compute_class_leaderboard(store: SavingsStore, *, limit: int = DEFAULT_LIMIT) -> List[RankedClass]:
    """Return classes ordered by verified transactions of their active students."""

    return rank_classes(
        store.list_classes(),
        store.list_active_students(),
        store.list_verified_transactions(),
        limit=limit,
    )


def find_student_rank(store: SavingsStore, student_id: int) -> int:
    """Position of the student in the full leaderboard; 0 when not ranked."""

    ranking = rank_students(store.list_active_students(), store.list_verified_transactions())
    return position_of(ranking, "student_id", student_id)


def find_class_rank(store: SavingsStore, class_id: int) -> int:
    """Position of the class in the full class leaderboard; 0 when not ranked."""

    ranking = rank_classes(
        store.list_classes(),
        store.list_active_students(),
        store.list_verified_transactions(),
    )
    return position_of(ranking, "class_id", class_id)
