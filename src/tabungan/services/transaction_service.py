"""Domain logic for recording and verifying savings transactions."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import Student, Transaction, TransactionDirection, VerificationStatus
from ..utils.datetime import to_naive_utc
from .badge_service import evaluate_badges
from .ranking import CENTS
from .records import BadgeAward
from .storage import SqlAlchemySavingsStore

logger = logging.getLogger(__name__)


class SavingsRuleViolation(Exception):
    """Raised when transaction rules are violated."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def _ensure_student(session: Session, student_id: int) -> Student:
    stmt = select(Student).where(Student.student_id == student_id)
    student = session.execute(stmt).scalar_one_or_none()
    if student is None:
        raise SavingsRuleViolation(f"Student {student_id} not found", status_code=404)
    return student


def _ensure_transaction(session: Session, transaction_id: int) -> Transaction:
    stmt = select(Transaction).where(Transaction.transaction_id == transaction_id)
    transaction = session.execute(stmt).scalar_one_or_none()
    if transaction is None:
        raise SavingsRuleViolation(f"Transaction {transaction_id} not found", status_code=404)
    return transaction


def record_transaction(
    session: Session,
    *,
    student_id: int,
    amount: Decimal,
    direction: TransactionDirection,
    transaction_date: Optional[datetime] = None,
) -> Transaction:
    """Insert a pending deposit or withdrawal for a student."""

    amount = Decimal(str(amount)).quantize(CENTS)
    if amount <= 0:
        raise SavingsRuleViolation("Transaction amount must be positive.")

    student = _ensure_student(session, student_id)
    when = to_naive_utc(transaction_date or datetime.now(timezone.utc))

    transaction = Transaction(
        student=student,
        amount=amount,
        direction=direction,
        transaction_date=when,
        verification_status=VerificationStatus.PENDING,
    )
    session.add(transaction)
    session.flush()
    session.refresh(transaction)
    return transaction


def verify_transaction(
    session: Session,
    *,
    transaction_id: int,
    status: VerificationStatus,
    rejection_note: Optional[str] = None,
) -> Tuple[Transaction, List[BadgeAward]]:
    """Apply a verification decision and evaluate badges once a transaction is verified."""

    if status is VerificationStatus.PENDING:
        raise SavingsRuleViolation("Verification must either verify or reject the transaction.")
    if status is VerificationStatus.REJECTED and not (rejection_note and rejection_note.strip()):
        raise SavingsRuleViolation("A rejection note is required when rejecting a transaction.")

    transaction = _ensure_transaction(session, transaction_id)
    previous = transaction.verification_status

    transaction.verification_status = status
    transaction.rejection_note = rejection_note if status is VerificationStatus.REJECTED else None
    session.flush()
    logger.info("transaction %s moved from %s to %s", transaction_id, previous.value, status.value)

    awards: List[BadgeAward] = []
    if status is VerificationStatus.VERIFIED:
        awards = evaluate_badges(SqlAlchemySavingsStore(session), transaction.student_id)

    session.refresh(transaction)
    return transaction, awards


def list_transactions(
    session: Session,
    *,
    student_id: Optional[int] = None,
    status: Optional[VerificationStatus] = None,
    limit: int = 50,
    offset: int = 0,
) -> Sequence[Transaction]:
    """Retrieve transactions with optional student/status filters."""

    stmt = (
        select(Transaction)
        .order_by(Transaction.transaction_date.desc(), Transaction.transaction_id.desc())
        .offset(offset)
        .limit(limit)
    )
    if student_id is not None:
        stmt = stmt.where(Transaction.student_id == student_id)
    if status is not None:
        stmt = stmt.where(Transaction.verification_status == status)

    return session.execute(stmt).scalars().all()
