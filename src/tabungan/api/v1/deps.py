"""Shared request dependencies."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ...core.config import get_settings
from ...core.database import get_db
from ...services.storage import SqlAlchemySavingsStore


def get_store(db: Session = Depends(get_db)) -> SqlAlchemySavingsStore:
    """Wrap the request session in a savings store."""

    return SqlAlchemySavingsStore(db)


def resolve_limit(limit: Optional[int]) -> int:
    """Apply the configured default and ceiling to a leaderboard limit."""

    settings = get_settings()
    if limit is None:
        limit = settings.leaderboard_default_limit
    return min(limit, settings.leaderboard_max_limit)
