"""Typed snapshot records exchanged between storage and the ranking engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..models.enums import TransactionDirection, VerificationStatus


@dataclass(frozen=True)
class StudentRecord:
    student_id: int
    name: str
    class_id: int
    class_name: str


@dataclass(frozen=True)
class ClassRecord:
    class_id: int
    name: str
    level: str


@dataclass(frozen=True)
class TransactionRecord:
    student_id: int
    direction: TransactionDirection
    amount: Decimal
    status: VerificationStatus
    transaction_date: Optional[datetime] = None

    @property
    def is_verified(self) -> bool:
        return self.status is VerificationStatus.VERIFIED


@dataclass(frozen=True)
class RankedStudent:
    student_id: int
    name: str
    class_name: str
    net_balance: Decimal
    deposit_count: int
    rank: int


@dataclass(frozen=True)
class RankedClass:
    class_id: int
    name: str
    level: str
    total_transactions: int
    active_student_count: int
    rank: int


@dataclass(frozen=True)
class BadgeAward:
    """A persisted badge row."""

    badge_id: int
    student_id: int
    name: str
    awarded_at: datetime
