"""Student domain model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from .enums import StudentStatus


class Student(Base):
    """Represents a student holding a school savings account."""

    __tablename__ = "students"

    student_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    nisn = Column(String, nullable=False)
    class_id = Column(Integer, ForeignKey("classes.class_id", ondelete="RESTRICT"), nullable=False)
    status = Column(Enum(StudentStatus, name="student_status"), nullable=False, default=StudentStatus.ACTIVE)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    school_class = relationship("SchoolClass", back_populates="students")
    transactions = relationship("Transaction", back_populates="student")
    badges = relationship("StudentBadge", back_populates="student")
