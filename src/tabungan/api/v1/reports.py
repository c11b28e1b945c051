"""Report endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...schemas import MonthlyReportRead, ReportSummaryRead
from ...services import report_service
from ...services.report_service import ReportRuleViolation
from ...services.storage import SqlAlchemySavingsStore
from .deps import get_store

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get(
    "/summary",
    response_model=ReportSummaryRead,
    summary="Savings summary",
    responses={
        200: {
            "description": "Verified transaction totals and average net savings",
            "content": {
                "application/json": {
                    "example": {
                        "total_transactions": 128,
                        "total_deposits": 2450000.0,
                        "total_withdrawals": 310000.0,
                        "active_student_count": 64,
                        "average_net_savings": 35666.67
                    }
                }
            },
        },
        400: {"description": "Invalid date range"},
    },
)
def get_summary(
    start_date: Optional[datetime] = Query(None, description="Include transactions on or after this time"),
    end_date: Optional[datetime] = Query(None, description="Include transactions on or before this time"),
    class_id: Optional[int] = Query(None, description="Restrict to one class"),
    store: SqlAlchemySavingsStore = Depends(get_store),
) -> ReportSummaryRead:
    """Return totals for verified transactions."""

    try:
        summary = report_service.summarize(store, start=start_date, end=end_date, class_id=class_id)
    except ReportRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc
    return ReportSummaryRead.model_validate(summary)


@router.get(
    "/monthly",
    response_model=List[MonthlyReportRead],
    summary="Monthly savings report",
    responses={
        200: {
            "description": "Per-month verified totals for a year, months without activity omitted",
            "content": {
                "application/json": {
                    "example": [
                        {
                            "year": 2025,
                            "month": 8,
                            "month_name": "Agustus",
                            "total_transactions": 42,
                            "total_deposits": 820000.0,
                            "total_withdrawals": 95000.0
                        }
                    ]
                }
            },
        }
    },
)
def get_monthly(
    year: int = Query(..., ge=2000, le=2100, description="Calendar year to report on"),
    class_id: Optional[int] = Query(None, description="Restrict to one class"),
    store: SqlAlchemySavingsStore = Depends(get_store),
) -> List[MonthlyReportRead]:
    """Return verified totals grouped by month."""

    rows = report_service.monthly_report(store, year=year, class_id=class_id)
    return [MonthlyReportRead.model_validate(row) for row in rows]
