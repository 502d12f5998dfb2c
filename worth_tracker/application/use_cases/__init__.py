"""Application use cases package."""

from .manage_items import ItemService
from .manage_users import UserService

__all__ = [
    "ItemService",
    "UserService",
]
