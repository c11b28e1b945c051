"""Class ranking endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...schemas import RankRead
from ...services import leaderboard_service
from ...services.storage import SqlAlchemySavingsStore
from .deps import get_store

router = APIRouter(prefix="/classes", tags=["classes"])


@router.get("/{class_id}/rank", response_model=RankRead, summary="Class leaderboard position")
def get_class_rank(class_id: int, store: SqlAlchemySavingsStore = Depends(get_store)) -> RankRead:
    """Return the class position; 0 when the class is not ranked."""

    return RankRead(rank=leaderboard_service.find_class_rank(store, class_id))
