"""Teacher model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from ..core.database import Base
from .enums import TeacherStatus


class Teacher(Base):
    """Staff member who may act as homeroom teacher of a class."""

    __tablename__ = "teachers"

    teacher_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    employee_number = Column(String, nullable=False)
    status = Column(Enum(TeacherStatus, name="teacher_status"), nullable=False, default=TeacherStatus.ACTIVE)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    homeroom_classes = relationship("SchoolClass", back_populates="homeroom_teacher")
