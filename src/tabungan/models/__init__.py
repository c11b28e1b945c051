"""SQLAlchemy models for the school savings service."""

from .enums import StudentStatus, TeacherStatus, TransactionDirection, VerificationStatus
from .school_class import SchoolClass
from .student import Student
from .student_badge import StudentBadge
from .teacher import Teacher
from .transaction import Transaction

__all__ = [
    "SchoolClass",
    "Student",
    "StudentBadge",
    "StudentStatus",
    "Teacher",
    "TeacherStatus",
    "Transaction",
    "TransactionDirection",
    "VerificationStatus",
]
