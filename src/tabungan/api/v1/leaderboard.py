"""Leaderboard endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...schemas import LeaderboardClass, LeaderboardStudent
from ...services import leaderboard_service
from ...services.storage import SqlAlchemySavingsStore
from .deps import get_store, resolve_limit

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get(
    "/students",
    response_model=List[LeaderboardStudent],
    summary="Top savers",
    responses={
        200: {
            "description": "Active students ordered by verified deposits, balance and name",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "student_id": 12,
                            "name": "Ayu Lestari",
                            "class_name": "VII A",
                            "net_balance": 105000.0,
                            "deposit_count": 3,
                            "rank": 1
                        }
                    ]
                }
            },
        }
    },
)
def get_student_leaderboard(
    limit: Optional[int] = Query(None, ge=1, description="Number of top students to return"),
    store: SqlAlchemySavingsStore = Depends(get_store),
) -> List[LeaderboardStudent]:
    """Return ranked list of active students."""

    entries = leaderboard_service.compute_student_leaderboard(store, limit=resolve_limit(limit))
    return [LeaderboardStudent.model_validate(entry) for entry in entries]


@router.get(
    "/classes",
    response_model=List[LeaderboardClass],
    summary="Most active classes",
    responses={
        200: {
            "description": "Classes ordered by verified transactions and active students",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "class_id": 3,
                            "name": "VII A",
                            "level": "7",
                            "total_transactions": 42,
                            "active_student_count": 28,
                            "rank": 1
                        }
                    ]
                }
            },
        }
    },
)
def get_class_leaderboard(
    limit: Optional[int] = Query(None, ge=1, description="Number of top classes to return"),
    store: SqlAlchemySavingsStore = Depends(get_store),
) -> List[LeaderboardClass]:
    """Return ranked list of classes."""

    entries = leaderboard_service.compute_class_leaderboard(store, limit=resolve_limit(limit))
    return [LeaderboardClass.model_validate(entry) for entry in entries]
