"""Database infrastructure for the worth tracker.

This module builds the SQLAlchemy engine backing the Storage Gateway. It
belongs to the infrastructure layer because it deals with the external
relational store (SQLite by default).
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from worth_tracker.application.ports.database import DatabaseEnginePort
from worth_tracker.infrastructure.settings import WorthTrackerSettings


def _is_memory_database(database: str | None) -> bool:
    return database in (None, "", ":memory:")


def _create_engine(db_url: str, busy_timeout: float) -> Engine:
    """Create a configured SQLAlchemy engine.

    SQLite connections may move across threads. An in-memory database lives
    on one pooled connection; callers check it out one at a time so every
    caller sees the same data.

    Args:
        db_url: Fully qualified database URL.
        busy_timeout: Seconds SQLite waits on a locked database.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    url = make_url(db_url)
    if url.get_backend_name() == "sqlite":
        options = {
            "connect_args": {
                "check_same_thread": False,
                "timeout": busy_timeout,
            },
            "future": True,
        }
        if _is_memory_database(url.database):
            options["poolclass"] = QueuePool
            options["pool_size"] = 1
            options["max_overflow"] = 0
        return create_engine(db_url, **options)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The engine is created lazily on first use and owned by this adapter, so
    each composition root controls its own storage handle.
    """

    def __init__(self, settings: WorthTrackerSettings | None = None) -> None:
        """Initialize the adapter.

        Args:
            settings: Optional settings; read from the environment if absent.
        """
        self._settings = settings or WorthTrackerSettings.from_env()
        self._engine: Engine | None = None

    @property
    def settings(self) -> WorthTrackerSettings:
        return self._settings

    def get_engine(self) -> Engine:
        """Get the engine for the worth tracker database.

        Returns:
            Engine: Lazily initialized engine.
        """
        if self._engine is None:
            self._engine = _create_engine(
                self._settings.database_url,
                self._settings.busy_timeout,
            )
        return self._engine

    def dispose(self) -> None:
        """Dispose the engine if it was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
