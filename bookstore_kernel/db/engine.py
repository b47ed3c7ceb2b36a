"""
Module: bookstore_kernel.db.engine
Responsibility: SQLAlchemy engine construction, session factory creation and
    transactional scope utilities for the SQL record-storage backend.
Architecture position: Kernel > DB.  May import from db/base.py.
    MUST NOT import from services/, storage/ or commands/ (except
    create_tables, which imports models so Base.metadata is populated).

Invariants enforced:
    - No module-level engine: every engine is owned by the storage object that
      created it, so a process (or a test) can hold several independent
      databases at once.
    - session_scope() commits on success and rolls back on any exception, so
      a persist-all call is all-or-nothing within its record set.

Failure modes:
    - sqlalchemy.exc.ArgumentError on a malformed database URL.
    - sqlalchemy.exc.OperationalError if the database cannot be opened.
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from bookstore_kernel.logging_config import get_logger

logger = get_logger("db.engine")


def create_storage_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given database URL.

    Args:
        database_url: SQLAlchemy URL, e.g. ``sqlite:///.data/bookstore.db``.
        echo: If True, log all SQL statements.

    Returns:
        SQLAlchemy Engine instance.
    """
    engine = create_engine(database_url, echo=echo)
    logger.info(
        "engine_initialized",
        extra={"dialect": engine.dialect.name, "echo": echo},
    )
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to ``engine``."""
    return sessionmaker(bind=engine, expire_on_commit=False)


@contextmanager
def session_scope(
    factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    """
    Provide a transactional scope around a series of operations.

    Postconditions: On normal exit, session is committed and closed.
        On exception, session is rolled back and closed, and the exception
        is re-raised to the caller.

    Usage:
        with session_scope(factory) as session:
            session.add(row)
    """
    session = factory()
    logger.debug("transaction_started")
    try:
        yield session
        session.commit()
        logger.debug("transaction_committed")
    except Exception:
        session.rollback()
        logger.warning("transaction_rolled_back", exc_info=True)
        raise
    finally:
        session.close()


def create_tables(engine: Engine) -> None:
    """Create every record-storage table that does not exist yet."""
    from bookstore_kernel.db.base import Base
    import bookstore_kernel.models  # noqa: F401

    Base.metadata.create_all(engine)

