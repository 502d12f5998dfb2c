"""Composition root for wiring infrastructure adapters."""

from worth_tracker.application.ports.database import DatabaseEnginePort
from worth_tracker.application.ports.storage_gateway import StorageGatewayPort
from worth_tracker.application.use_cases.manage_items import ItemService
from worth_tracker.application.use_cases.manage_users import UserService
from worth_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from worth_tracker.infrastructure.logging.logger import get_app_logger
from worth_tracker.infrastructure.settings import WorthTrackerSettings
from worth_tracker.infrastructure.storage_gateway import (
    SqlAlchemyStorageGateway,
)


def build_database_adapter(
    settings: WorthTrackerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(settings)


def build_storage_gateway(
    db_port: DatabaseEnginePort | None = None,
) -> StorageGatewayPort:
    """Return the Storage Gateway over the configured database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyStorageGateway(resolved_db, logger=get_app_logger())


def build_user_service(storage: StorageGatewayPort) -> UserService:
    """Return the user service over the given storage."""
    return UserService(storage, logger=get_app_logger())


def build_item_service(
    storage: StorageGatewayPort,
    user_service: UserService | None = None,
) -> ItemService:
    """Return the item service over the given storage."""
    resolved_users = user_service or build_user_service(storage)
    return ItemService(storage, resolved_users, logger=get_app_logger())


def build_services(
    storage: StorageGatewayPort | None = None,
) -> tuple[UserService, ItemService]:
    """Bootstrap the schema and return the user and item services.

    Raises:
        StorageFailureError: If the schema cannot be created.
    """
    resolved_storage = storage or build_storage_gateway()
    resolved_storage.bootstrap()
    user_service = build_user_service(resolved_storage)
    item_service = build_item_service(resolved_storage, user_service)
    return user_service, item_service


__all__ = [
    "build_database_adapter",
    "build_storage_gateway",
    "build_user_service",
    "build_item_service",
    "build_services",
]
