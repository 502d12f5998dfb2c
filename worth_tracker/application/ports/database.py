"""Database ports for the worth tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the Storage Gateway."""

    def get_engine(self) -> Engine:
        """Get the engine for the worth tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the relational store.
        """

    def dispose(self) -> None:
        """Release every pooled connection held by the engine."""


__all__ = ["DatabaseEnginePort"]
