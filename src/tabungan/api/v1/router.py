"""Primary API router definition."""

from fastapi import APIRouter

from . import classes, leaderboard, reports, students, transactions

api_router = APIRouter()

api_router.include_router(leaderboard.router)
api_router.include_router(students.router)
api_router.include_router(classes.router)
api_router.include_router(transactions.router)
api_router.include_router(reports.router)


@api_router.get("/health", tags=["health"])
async def healthcheck() -> dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "ok"}
