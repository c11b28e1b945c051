"""Background scheduler for the nightly badge sweep."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI
from sqlalchemy.orm import sessionmaker

from ..core.config import get_settings
from ..core.database import get_session_factory
from ..services.badge_sweep_service import run_badge_sweep
from ..services.storage import SqlAlchemySavingsStore

logger = logging.getLogger(__name__)

_scheduler = AsyncIOScheduler(timezone="UTC")


def run_sweep_once(session_factory: sessionmaker | None = None) -> dict[str, int]:
    """Evaluate badges for every active student in one committed unit of work."""

    session = (session_factory or get_session_factory())()
    try:
        summary = run_badge_sweep(SqlAlchemySavingsStore(session))
        session.commit()
        logger.info("badge sweep completed: %s", summary)
        return summary
    except Exception:
        session.rollback()
        logger.exception("badge sweep job failed")
        raise
    finally:
        session.close()


def _scheduled_job() -> None:
    # Runs on the scheduler's thread pool executor.
    run_sweep_once()


def register_scheduler(app: FastAPI) -> None:
    """Attach APScheduler lifecycle hooks to the FastAPI app."""

    @app.on_event("startup")
    async def start_scheduler() -> None:
        if not _scheduler.running:
            _scheduler.add_job(
                _scheduled_job,
                "cron",
                hour=get_settings().badge_sweep_hour,
                minute=0,
                id="badge_sweep",
                misfire_grace_time=3600,
                replace_existing=True,
            )
            _scheduler.start()
            logger.info("badge sweep scheduler started")

    @app.on_event("shutdown")
    async def shutdown_scheduler() -> None:
        if _scheduler.running:
            _scheduler.shutdown(wait=False)
            logger.info("badge sweep scheduler stopped")
