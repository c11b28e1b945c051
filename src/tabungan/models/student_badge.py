"""Awarded achievement badges."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..core.database import Base


class StudentBadge(Base):
    """A named badge held by a student, at most once per name."""

    __tablename__ = "student_badges"
    __table_args__ = (
        UniqueConstraint("student_id", "name", name="student_badges_unique"),
    )

    badge_id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(Integer, ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False)
    name = Column(String, nullable=False)
    awarded_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    student = relationship("Student", back_populates="badges")
