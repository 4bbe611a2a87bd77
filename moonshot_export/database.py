"""
Database configuration and session handling for Moonshot Export.

Reads the request log store through SQLAlchemy ORM. The store is
normally written by the recording proxy; this tool only reads from it.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import DEFAULT_DATABASE_URL
from .exceptions import StorageError


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(database_url: str = DEFAULT_DATABASE_URL) -> Engine:
    """
    Create an engine for the given database URL.

    SQLite URLs get ``check_same_thread`` disabled so that test code can
    share a connection pool with the CLI runner.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=False  # Set to True for SQL query logging
    )


def init_db(engine: Engine) -> None:
    """
    Create all tables known to the models.

    Only used to prepare local and test databases; production stores are
    created by the recording side.
    """
    # Register models on Base.metadata before creating tables
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(database_url: str = DEFAULT_DATABASE_URL) -> Iterator[Session]:
    """
    Open a database session and make sure it is closed after use.

    Usage:
        with session_scope(url) as db:
            record = get_request(db, selector)

    Raises:
        StorageError: if the URL cannot be parsed or its driver is not installed
    """
    try:
        engine = create_db_engine(database_url)
    except (SQLAlchemyError, ImportError) as e:
        raise StorageError(f"cannot open database: {e}") from e
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()
