"""Nightly re-evaluation of badges for every active student."""

from __future__ import annotations

from typing import Dict

from .badge_service import evaluate_badges
from .storage import SavingsStore


def run_badge_sweep(store: SavingsStore) -> Dict[str, int]:
    """Evaluate badges for all active students.

    Returns summary statistics useful for logging/testing.
    """

    summary = {"students_processed": 0, "badges_awarded": 0}
    for student in store.list_active_students():
        awards = evaluate_badges(store, student.student_id)
        summary["students_processed"] += 1
        summary["badges_awarded"] += len(awards)
    return summary
