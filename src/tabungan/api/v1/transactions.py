"""Transaction endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...models import VerificationStatus
from ...schemas import BadgeRead, TransactionCreate, TransactionRead, TransactionVerification, TransactionVerify
from ...services import transaction_service
from ...services.transaction_service import SavingsRuleViolation

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post(
    "",
    response_model=TransactionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record a deposit or withdrawal",
    responses={
        201: {
            "description": "Transaction recorded as pending",
            "content": {
                "application/json": {
                    "example": {
                        "transaction_id": 501,
                        "student_id": 12,
                        "transaction_date": "2025-08-04T07:30:00",
                        "amount": 20000.0,
                        "direction": "deposit",
                        "verification_status": "pending",
                        "rejection_note": None,
                        "created_at": "2025-08-04T07:31:12"
                    }
                }
            },
        },
        400: {"description": "Business rule violation"},
        404: {"description": "Student not found"},
    },
)
def create_transaction(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
) -> TransactionRead:
    """Record a transaction awaiting teacher verification.

    Example request body::

        {
            "student_id": 12,
            "amount": 20000,
            "direction": "deposit"
        }
    """

    try:
        transaction = transaction_service.record_transaction(
            db,
            student_id=payload.student_id,
            amount=payload.amount,
            direction=payload.direction,
            transaction_date=payload.transaction_date,
        )
        db.commit()
        db.refresh(transaction)
        return transaction
    except SavingsRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.post(
    "/{transaction_id}/verification",
    response_model=TransactionVerification,
    summary="Verify or reject a transaction",
    responses={
        400: {"description": "Business rule violation"},
        404: {"description": "Transaction not found"},
    },
)
def verify_transaction(
    transaction_id: int,
    payload: TransactionVerify,
    db: Session = Depends(get_db),
) -> TransactionVerification:
    """Record a verification decision.

    Example request body::

        {
            "status": "rejected",
            "rejection_note": "Slip setoran tidak terbaca"
        }
    """

    try:
        transaction, awards = transaction_service.verify_transaction(
            db,
            transaction_id=transaction_id,
            status=payload.status,
            rejection_note=payload.rejection_note,
        )
        db.commit()
        db.refresh(transaction)
        return TransactionVerification(
            transaction=TransactionRead.model_validate(transaction),
            awarded=[BadgeRead.model_validate(award) for award in awards],
        )
    except SavingsRuleViolation as exc:
        db.rollback()
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc


@router.get("", response_model=List[TransactionRead], summary="List transactions")
def list_transactions(
    *,
    student_id: Optional[int] = Query(None, description="Filter by student id"),
    verification_status: Optional[VerificationStatus] = Query(None, description="Filter by verification status"),
    limit: int = Query(50, ge=1, le=100, description="Maximum items to return"),
    offset: int = Query(0, ge=0, description="Items to skip for pagination"),
    db: Session = Depends(get_db),
) -> List[TransactionRead]:
    """Fetch transactions, newest first."""

    transactions = transaction_service.list_transactions(
        db,
        student_id=student_id,
        status=verification_status,
        limit=limit,
        offset=offset,
    )
    return list(transactions)
