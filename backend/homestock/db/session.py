"""
Database Session Management
Creates and manages SQLAlchemy database engine and session factory.

This module sets up the database connection using SQLAlchemy 2.0 style
and provides a session factory for creating database sessions in endpoints.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from homestock.core.config import settings


# The engine keeps a process-wide connection pool.
# - pool_pre_ping: verify connections before use (prevents stale connections)
# - pool_recycle: recycle connections every hour
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,
    pool_recycle=3600,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function that provides database sessions to FastAPI endpoints.

    One session per request; closed after the endpoint returns,
    even if an exception occurs.

    Usage in FastAPI endpoint:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.query(Item).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
