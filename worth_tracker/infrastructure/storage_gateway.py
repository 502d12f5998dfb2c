"""SQLAlchemy-backed Storage Gateway for users and items."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from worth_tracker.application.ports.database import DatabaseEnginePort
from worth_tracker.application.ports.storage_gateway import StorageGatewayPort
from worth_tracker.domain.errors import (
    ItemNotFoundError,
    StorageConstraintError,
    StorageFailureError,
)
from worth_tracker.domain.models import ItemDTO, UserDTO
from worth_tracker.infrastructure.logging.logger import get_app_logger


CREATE_USERS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS users (
    uid  INTEGER PRIMARY KEY,
    name TEXT UNIQUE
)
"""

CREATE_ITEMS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS items (
    id    INTEGER PRIMARY KEY,
    uid   INTEGER NOT NULL,
    name  TEXT,
    type  TEXT,
    value BIGINT
)
"""

INSERT_USER_SQL = text("INSERT INTO users (name) VALUES (:name)")

SELECT_USER_BY_NAME_SQL = text(
    """
    SELECT uid, name
    FROM users
    WHERE name = :name
    LIMIT 1
    """
)

SELECT_USERS_SQL = text(
    """
    SELECT uid, name
    FROM users
    ORDER BY uid
    """
)

INSERT_ITEM_SQL = text(
    """
    INSERT INTO items (uid, name, type, value)
    VALUES (:uid, :name, :type, :value)
    """
)

UPDATE_ITEM_SQL = text(
    """
    UPDATE items
    SET uid = :uid, name = :name, type = :type, value = :value
    WHERE id = :id
    """
)

DELETE_ITEM_SQL = text("DELETE FROM items WHERE id = :id")

SELECT_ITEMS_BY_OWNER_SQL = text(
    """
    SELECT id, uid AS owner_id, name, type AS item_type, value
    FROM items
    WHERE uid = :uid
    ORDER BY id
    """
)

SELECT_ITEM_BY_ID_SQL = text(
    """
    SELECT id, uid AS owner_id, name, type AS item_type, value
    FROM items
    WHERE id = :id
    """
)


class SqlAlchemyStorageGateway(StorageGatewayPort):
    """Storage Gateway holding no business rules.

    Every SQLAlchemy error is re-raised as ``StorageFailureError``;
    constraint violations become ``StorageConstraintError``.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the gateway.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def bootstrap(self) -> None:
        """Create the users and items tables if they do not exist."""
        with self._storage_errors("bootstrap"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_USERS_TABLE_SQL)
                conn.exec_driver_sql(CREATE_ITEMS_TABLE_SQL)
        self._logger.info(f"Schema ready on {engine.url}")

    def close(self) -> None:
        self._db_port.dispose()

    def insert_user(self, name: str) -> None:
        with self._storage_errors("insert_user"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_USER_SQL, {"name": name})

    def find_user_by_name(self, name: str) -> UserDTO | None:
        with self._storage_errors("find_user_by_name"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_USER_BY_NAME_SQL,
                    {"name": name},
                ).first()
        if row is None:
            return None
        return UserDTO(id=row.uid, name=row.name)

    def list_users(self) -> list[UserDTO]:
        with self._storage_errors("list_users"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_USERS_SQL).all()
        return [UserDTO(id=row.uid, name=row.name) for row in rows]

    def insert_item(
        self,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        with self._storage_errors("insert_item"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.execute(
                    INSERT_ITEM_SQL,
                    {
                        "uid": owner_id,
                        "name": name,
                        "type": item_type,
                        "value": value,
                    },
                )

    def replace_item(
        self,
        item_id: int,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        """Replace every column of an existing item but its id.

        Raises:
            ItemNotFoundError: If no item has the given id.
        """
        with self._storage_errors("replace_item"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    UPDATE_ITEM_SQL,
                    {
                        "id": item_id,
                        "uid": owner_id,
                        "name": name,
                        "type": item_type,
                        "value": value,
                    },
                )
                updated = result.rowcount
        if updated == 0:
            raise ItemNotFoundError(item_id)

    def delete_item(self, item_id: int) -> None:
        with self._storage_errors("delete_item"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                conn.execute(DELETE_ITEM_SQL, {"id": item_id})

    def list_items_by_owner(self, owner_id: int) -> list[ItemDTO]:
        with self._storage_errors("list_items_by_owner"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ITEMS_BY_OWNER_SQL,
                    {"uid": owner_id},
                ).all()
        return [self._to_item(row) for row in rows]

    def find_item_by_id(self, item_id: int) -> ItemDTO | None:
        with self._storage_errors("find_item_by_id"):
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_ITEM_BY_ID_SQL,
                    {"id": item_id},
                ).first()
        if row is None:
            return None
        return self._to_item(row)

    @staticmethod
    def _to_item(row) -> ItemDTO:
        return ItemDTO(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            item_type=row.item_type,
            value=row.value,
        )

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Translate SQLAlchemy errors into storage failures.

        Args:
            operation: Name of the gateway operation, kept on the error.
        """
        try:
            yield
        except IntegrityError as exc:
            self._logger.warning(
                f"Constraint violation during {operation}: {exc.orig}"
            )
            raise StorageConstraintError(operation, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            self._logger.error(f"Storage failure during {operation}: {exc}")
            raise StorageFailureError(operation, str(exc)) from exc


__all__ = [
    "SqlAlchemyStorageGateway",
    "CREATE_USERS_TABLE_SQL",
    "CREATE_ITEMS_TABLE_SQL",
    "INSERT_USER_SQL",
    "SELECT_USER_BY_NAME_SQL",
    "SELECT_USERS_SQL",
    "INSERT_ITEM_SQL",
    "UPDATE_ITEM_SQL",
    "DELETE_ITEM_SQL",
    "SELECT_ITEMS_BY_OWNER_SQL",
    "SELECT_ITEM_BY_ID_SQL",
]
