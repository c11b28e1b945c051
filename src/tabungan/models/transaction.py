"""Savings transaction model."""

from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from .enums import TransactionDirection, VerificationStatus


class Transaction(Base):
    """Deposit or withdrawal awaiting (or past) teacher verification.

    ``amount`` is always positive; the sign comes from ``direction``.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("amount > 0", name="transactions_amount_positive"),
    )

    transaction_id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.student_id", ondelete="RESTRICT"), nullable=False)
    transaction_date = Column(DateTime, nullable=False)
    amount = Column(Numeric(15, 2, asdecimal=True), nullable=False)
    direction = Column(Enum(TransactionDirection, name="transaction_direction"), nullable=False)
    verification_status = Column(
        Enum(VerificationStatus, name="verification_status"),
        nullable=False,
        default=VerificationStatus.PENDING,
    )
    rejection_note = Column(String)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    student = relationship("Student", back_populates="transactions")
