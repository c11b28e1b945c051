"""Per-student savings endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas import BadgeEvaluationRead, BadgeRead, BalanceRead, RankRead, SavingsSummaryRead
from ...services import badge_service, balance_service, leaderboard_service
from ...services.storage import SqlAlchemySavingsStore
from .deps import get_store

router = APIRouter(prefix="/students", tags=["students"])


def _require_student(store: SqlAlchemySavingsStore, student_id: int) -> None:
    if not store.student_exists(student_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Student {student_id} not found")


@router.get("/{student_id}/balance", response_model=BalanceRead, summary="Net verified balance")
def get_balance(student_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> BalanceRead:
    """Return verified deposits minus verified withdrawals."""

    _require_student(store, student_id)
    return BalanceRead(student_id=student_id, net_balance=balance_service.compute_net_balance(store, student_id))


@router.get("/{student_id}/rank", response_model=RankRead, summary="Student leaderboard position")
def get_rank(student_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> RankRead:
    """Return the student position; 0 when the student is not ranked."""

    return RankRead(rank=leaderboard_service.find_student_rank(store, student_id))


@router.get("/{student_id}/summary", response_model=SavingsSummaryRead, summary="Savings summary")
def get_summary(student_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> SavingsSummaryRead:
    _require_student(store, student_id)
    return SavingsSummaryRead.model_validate(balance_service.student_summary(store, student_id))


@router.get("/{student_id}/badges", response_model=List[BadgeRead], summary="Badges held by a student")
def list_badges(student_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> List[BadgeRead]:
    _require_student(store, student_id)
    return [BadgeRead.model_validate(badge) for badge in store.list_badges(student_id)]


@router.post(
    "/{student_id}/badges/evaluate",
    response_model=BadgeEvaluationRead,
    summary="Award newly earned badges",
    responses={404: {"description": "Student not found"}},
)
def evaluate_badges(student_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> BadgeEvaluationRead:
    """Check badge thresholds and persist any badge not yet held."""

    _require_student(store, student_id)
    awards = badge_service.evaluate_badges(store, student_id)
    store.session.commit()
    return BadgeEvaluationRead(awarded=[BadgeRead.model_validate(award) for award in awards])
