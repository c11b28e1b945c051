"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..models import TransactionDirection, VerificationStatus
from .student import BadgeRead


class TransactionCreate(BaseModel):
    """Request body for recording a deposit or withdrawal."""

    student_id: int
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2)
    direction: TransactionDirection
    transaction_date: Optional[datetime] = None


class TransactionVerify(BaseModel):
    """Verification decision for a pending transaction."""

    status: VerificationStatus
    rejection_note: Optional[str] = Field(None, max_length=500)


class TransactionRead(BaseModel):
    """Transaction response payload."""

    model_config = ConfigDict(from_attributes=True)

    transaction_id: int
    student_id: int
    transaction_date: datetime
    amount: Decimal
    direction: TransactionDirection
    verification_status: VerificationStatus
    rejection_note: Optional[str]
    created_at: datetime

    @field_serializer("amount")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)


class TransactionVerification(BaseModel):
    """Response returned after a verification decision."""

    transaction: TransactionRead
    awarded: List[BadgeRead]
