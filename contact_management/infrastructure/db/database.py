"""
SQL Database
============

Engine and session management for the relational store.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from contact_management.domain.exceptions import StoreError
from contact_management.infrastructure.db.orm_models import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the SQLAlchemy engine and hands out transactional sessions.

    One instance is registered in the DI container at startup and shared
    by every repository.
    """

    def __init__(self, url: str, logger: logging.Logger, echo: bool = False):
        """
        Initialize engine and session factory.

        Args:
            url: SQLAlchemy database URL
            logger: Logger for store failures
            echo: Log every SQL statement
        """
        self._logger = logger
        engine_options = {"echo": echo, "future": True, "pool_pre_ping": True}
        if url.startswith("sqlite"):
            # Sessions are used from FastAPI's worker threads
            engine_options["connect_args"] = {"check_same_thread": False}

        self._engine: Engine = create_engine(url, **engine_options)
        if url.startswith("sqlite"):
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self._engine)
        self._logger.info("Database schema is up to date")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Open a session wrapping exactly one transaction.

        Commits when the block succeeds, rolls back on any error and
        converts SQLAlchemy failures into StoreError.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            self._logger.error(f"Database operation failed: {exc}")
            raise StoreError(original_exception=exc) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()
        self._logger.info("Database connections closed")
