"""Per-student savings and badge schemas."""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class BalanceRead(BaseModel):
    student_id: int
    net_balance: Decimal

    @field_serializer("net_balance")
    def _serialize_balance(self, value: Decimal) -> float:
        return float(value)


class SavingsSummaryRead(BaseModel):
    """Balance, deposit count and leaderboard position of a student."""

    model_config = ConfigDict(from_attributes=True)

    student_id: int
    net_balance: Decimal
    deposit_count: int = Field(..., ge=0)
    rank: int = Field(..., ge=0, description="Leaderboard position, 0 when unranked.")

    @field_serializer("net_balance")
    def _serialize_balance(self, value: Decimal) -> float:
        return float(value)


class BadgeRead(BaseModel):
    """Badge held by a student."""

    model_config = ConfigDict(from_attributes=True)

    badge_id: int
    student_id: int
    name: str
    awarded_at: datetime


class BadgeEvaluationRead(BaseModel):
    awarded: List[BadgeRead]
