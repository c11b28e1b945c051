"""Status and direction enumerations shared by models and the ranking engine."""

import enum


class StudentStatus(str, enum.Enum):
    """Enrollment state; only active students are ranked."""

    ACTIVE = "active"
    GRADUATED = "graduated"
    INACTIVE = "inactive"


class TeacherStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class TransactionDirection(str, enum.Enum):
    """Whether a transaction adds to or draws from the savings balance."""

    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class VerificationStatus(str, enum.Enum):
    """Teacher verification state of a transaction."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
