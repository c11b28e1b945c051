"""Shared fixtures: an in-memory SQLite database and a seeded-data builder."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from tabungan.core.database import Base, build_session_factory, get_db
from tabungan.main import create_app
from tabungan.models import (
    SchoolClass,
    Student,
    StudentStatus,
    Teacher,
    Transaction,
    TransactionDirection,
    VerificationStatus,
)
from tabungan.services.storage import SqlAlchemySavingsStore


@pytest.fixture
def session_factory():
    factory = build_session_factory(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    engine = factory.kw["bind"]

    # pysqlite needs explicit BEGIN for SAVEPOINT support
    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(engine)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def store(session):
    return SqlAlchemySavingsStore(session)


class Seeder:
    """Builds master data and transactions with minimal boilerplate."""

    def __init__(self, session) -> None:
        self.session = session
        self._teacher = None

    def teacher(self) -> Teacher:
        if self._teacher is None:
            self._teacher = Teacher(name="Bu Sari", employee_number="198701012010012001")
            self.session.add(self._teacher)
            self.session.flush()
        return self._teacher

    def school_class(self, name: str, level: str = "7") -> SchoolClass:
        school_class = SchoolClass(name=name, level=level, homeroom_teacher=self.teacher())
        self.session.add(school_class)
        self.session.flush()
        return school_class

    def student(self, name: str, school_class: SchoolClass, status: StudentStatus = StudentStatus.ACTIVE) -> Student:
        student = Student(name=name, nisn=f"00{len(name)}{name[:3]}", school_class=school_class, status=status)
        self.session.add(student)
        self.session.flush()
        return student

    def txn(
        self,
        student: Student,
        amount,
        direction: TransactionDirection = TransactionDirection.DEPOSIT,
        status: VerificationStatus = VerificationStatus.VERIFIED,
        when: datetime = datetime(2025, 8, 4, 7, 30),
    ) -> Transaction:
        transaction = Transaction(
            student=student,
            amount=Decimal(str(amount)),
            direction=direction,
            verification_status=status,
            transaction_date=when,
        )
        self.session.add(transaction)
        self.session.flush()
        return transaction

    def deposits(self, student: Student, *amounts) -> None:
        for amount in amounts:
            self.txn(student, amount)


@pytest.fixture
def seed(session) -> Seeder:
    return Seeder(session)


@pytest.fixture
def client(session):
    app = create_app(with_scheduler=False)

    def _override_get_db():
        yield session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
