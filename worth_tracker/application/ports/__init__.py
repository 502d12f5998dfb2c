"""Application ports package."""

from .database import DatabaseEnginePort
from .storage_gateway import (
    ItemsStoragePort,
    StorageGatewayPort,
    UsersStoragePort,
)

__all__ = [
    "DatabaseEnginePort",
    "ItemsStoragePort",
    "StorageGatewayPort",
    "UsersStoragePort",
]
