"""Domain models package."""

from .items import ItemDTO, ItemReport
from .users import UserDTO

__all__ = [
    "ItemDTO",
    "ItemReport",
    "UserDTO",
]
