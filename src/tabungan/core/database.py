"""Database session and metadata configuration."""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import get_settings

Base = declarative_base()


def build_session_factory(database_url: str, **engine_kwargs) -> sessionmaker:
    """Create an engine for ``database_url`` and return a bound session factory."""

    engine = create_engine(database_url, future=True, **engine_kwargs)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker:
    """Return the session factory for the configured database."""

    return build_session_factory(get_settings().database_url)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for request lifetime."""

    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
