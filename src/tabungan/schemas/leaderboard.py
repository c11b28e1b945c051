"""Leaderboard response schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class LeaderboardStudent(BaseModel):
    """Ranked student entry."""

    model_config = ConfigDict(from_attributes=True)

    student_id: int
    name: str
    class_name: str
    net_balance: Decimal
    deposit_count: int = Field(..., ge=0)
    rank: int = Field(..., ge=1)

    @field_serializer("net_balance")
    def _serialize_balance(self, value: Decimal) -> float:
        return float(value)


class LeaderboardClass(BaseModel):
    """Ranked class entry."""

    model_config = ConfigDict(from_attributes=True)

    class_id: int
    name: str
    level: str
    total_transactions: int = Field(..., ge=0)
    active_student_count: int = Field(..., ge=0)
    rank: int = Field(..., ge=1)


class RankRead(BaseModel):
    """Position lookup result; rank 0 means the entity is not ranked."""

    rank: int = Field(..., ge=0)
