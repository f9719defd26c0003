"""Database engine and session helpers for the roster store."""

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base

DEFAULT_DB_URL = "sqlite:///roster.db"


def create_db_engine(db_url: str = DEFAULT_DB_URL, echo: bool = False):
    """Create SQLAlchemy engine."""
    return create_engine(db_url, echo=echo)


def init_database(db_url: str = DEFAULT_DB_URL, reset: bool = False) -> None:
    """
    Create the roster tables.

    With ``reset`` the existing tables are dropped first (WARNING: deletes
    the roster and the stored schedule).
    """
    engine = create_db_engine(db_url)
    if reset:
        Base.metadata.drop_all(engine)
        print(f"[WARN] Dropped roster tables: {db_url}")
    Base.metadata.create_all(engine)
    print(f"[INFO] Database initialized: {db_url}")


def get_session(db_url: str = DEFAULT_DB_URL) -> Session:
    """Open a session, creating missing tables so commands work without init-db."""
    engine = create_db_engine(db_url)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)()
