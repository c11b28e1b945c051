"""Read/award access to persisted savings data."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import SchoolClass, Student, StudentBadge, StudentStatus, Transaction, VerificationStatus
from ..utils.datetime import to_naive_utc
from .records import BadgeAward, ClassRecord, StudentRecord, TransactionRecord

logger = logging.getLogger(__name__)


class AwardOutcome(str, enum.Enum):
    SUCCESS = "success"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class AwardResult:
    """Outcome of a badge insert; ``badge`` is set only on success."""

    outcome: AwardOutcome
    badge: Optional[BadgeAward] = None


def _badge_record(badge: StudentBadge) -> BadgeAward:
    return BadgeAward(
        badge_id=badge.badge_id,
        student_id=badge.student_id,
        name=badge.name,
        awarded_at=badge.awarded_at,
    )


class SavingsStore(Protocol):
    """Snapshot reads and badge persistence consumed by the savings services."""

    def list_active_students(self) -> List[StudentRecord]: ...

    def list_classes(self) -> List[ClassRecord]: ...

    def list_verified_transactions(self, student_id: Optional[int] = None) -> List[TransactionRecord]: ...

    def list_dated_transactions(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        class_id: Optional[int] = None,
    ) -> List[TransactionRecord]: ...

    def list_awarded_badge_names(self, student_id: int) -> List[str]: ...

    def list_badges(self, student_id: int) -> List[BadgeAward]: ...

    def award_badge(self, student_id: int, name: str) -> AwardResult: ...

    def student_exists(self, student_id: int) -> bool: ...


class SqlAlchemySavingsStore:
    """``SavingsStore`` backed by a caller-owned SQLAlchemy session.

    The store never commits; transaction boundaries belong to the caller.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_students(self) -> List[StudentRecord]:
        stmt = (
            select(Student.student_id, Student.name, Student.class_id, SchoolClass.name)
            .join(SchoolClass, SchoolClass.class_id == Student.class_id)
            .where(Student.status == StudentStatus.ACTIVE)
        )
        return [
            StudentRecord(student_id=student_id, name=name, class_id=class_id, class_name=class_name)
            for student_id, name, class_id, class_name in self.session.execute(stmt).all()
        ]

    def list_classes(self) -> List[ClassRecord]:
        stmt = select(SchoolClass.class_id, SchoolClass.name, SchoolClass.level)
        return [
            ClassRecord(class_id=class_id, name=name, level=level)
            for class_id, name, level in self.session.execute(stmt).all()
        ]

    def list_verified_transactions(self, student_id: Optional[int] = None) -> List[TransactionRecord]:
        stmt = select(Transaction.student_id, Transaction.direction, Transaction.amount).where(
            Transaction.verification_status == VerificationStatus.VERIFIED
        )
        if student_id is not None:
            stmt = stmt.where(Transaction.student_id == student_id)
        return [
            TransactionRecord(
                student_id=owner_id,
                direction=direction,
                amount=amount,
                status=VerificationStatus.VERIFIED,
            )
            for owner_id, direction, amount in self.session.execute(stmt).all()
        ]

    def list_dated_transactions(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        class_id: Optional[int] = None,
    ) -> List[TransactionRecord]:
        """Verified transactions with their dates, within ``[start, end]`` inclusive."""

        stmt = select(
            Transaction.student_id,
            Transaction.direction,
            Transaction.amount,
            Transaction.transaction_date,
        ).where(Transaction.verification_status == VerificationStatus.VERIFIED)

        if class_id is not None:
            stmt = stmt.join(Student, Student.student_id == Transaction.student_id).where(
                Student.class_id == class_id
            )
        if start is not None:
            stmt = stmt.where(Transaction.transaction_date >= to_naive_utc(start))
        if end is not None:
            stmt = stmt.where(Transaction.transaction_date <= to_naive_utc(end))

        return [
            TransactionRecord(
                student_id=owner_id,
                direction=direction,
                amount=amount,
                status=VerificationStatus.VERIFIED,
                transaction_date=transaction_date,
            )
            for owner_id, direction, amount, transaction_date in self.session.execute(stmt).all()
        ]

    def list_awarded_badge_names(self, student_id: int) -> List[str]:
        stmt = select(StudentBadge.name).where(StudentBadge.student_id == student_id)
        return list(self.session.execute(stmt).scalars().all())

    def list_badges(self, student_id: int) -> List[BadgeAward]:
        stmt = (
            select(StudentBadge)
            .where(StudentBadge.student_id == student_id)
            .order_by(StudentBadge.awarded_at.asc(), StudentBadge.badge_id.asc())
        )
        return [_badge_record(badge) for badge in self.session.execute(stmt).scalars().all()]

    def award_badge(self, student_id: int, name: str) -> AwardResult:
        badge = StudentBadge(student_id=student_id, name=name, awarded_at=datetime.utcnow())
        try:
            with self.session.begin_nested():
                self.session.add(badge)
        except IntegrityError:
            logger.info("badge %r already held by student %s", name, student_id)
            return AwardResult(outcome=AwardOutcome.DUPLICATE)
        return AwardResult(outcome=AwardOutcome.SUCCESS, badge=_badge_record(badge))

    def student_exists(self, student_id: int) -> bool:
        stmt = select(Student.student_id).where(Student.student_id == student_id)
        return self.session.execute(stmt).scalar_one_or_none() is not None
