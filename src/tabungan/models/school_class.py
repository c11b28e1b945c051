"""Class (rombongan belajar) model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base


class SchoolClass(Base):
    """A class grouping students under one homeroom teacher."""

    __tablename__ = "classes"

    class_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    level = Column(String, nullable=False)
    homeroom_teacher_id = Column(Integer, ForeignKey("teachers.teacher_id", ondelete="RESTRICT"), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    homeroom_teacher = relationship("Teacher", back_populates="homeroom_classes")
    students = relationship("Student", back_populates="school_class")
