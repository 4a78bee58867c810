"""Database engine/session helpers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_db_engine(db_url: str) -> Engine:
    """Create a SQLAlchemy engine with conservative defaults for scripts."""
    return create_engine(db_url, pool_pre_ping=True, future=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the provided engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def read_only_session(db_url: str) -> Iterator[Session]:
    """Open a session that is always rolled back; corpus reads never write."""
    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)
    try:
        with session_factory() as session:
            try:
                yield session
            finally:
                session.rollback()
    finally:
        engine.dispose()
