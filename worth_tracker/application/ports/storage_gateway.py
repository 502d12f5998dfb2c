"""Ports for durable user and item storage."""

from typing import Protocol

from worth_tracker.domain.models import ItemDTO, UserDTO


class UsersStoragePort(Protocol):
    """Port exposing typed primitives for user records."""

    def insert_user(self, name: str) -> None:
        """Append a new user row."""

    def find_user_by_name(self, name: str) -> UserDTO | None:
        """Return the user with the given name, or None."""

    def list_users(self) -> list[UserDTO]:
        """Return every stored user."""


class ItemsStoragePort(Protocol):
    """Port exposing typed primitives for item records."""

    def insert_item(
        self,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        """Append a new item row."""

    def replace_item(
        self,
        item_id: int,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        """Replace every column of an existing item but its id."""

    def delete_item(self, item_id: int) -> None:
        """Delete an item; a missing id is not an error."""

    def list_items_by_owner(self, owner_id: int) -> list[ItemDTO]:
        """Return every item owned by the given user id."""

    def find_item_by_id(self, item_id: int) -> ItemDTO | None:
        """Return the item with the given id, or None."""


class StorageGatewayPort(UsersStoragePort, ItemsStoragePort, Protocol):
    """Port combining schema lifecycle with user and item primitives."""

    def bootstrap(self) -> None:
        """Ensure the users and items tables exist."""

    def close(self) -> None:
        """Release the underlying storage handle."""


__all__ = [
    "UsersStoragePort",
    "ItemsStoragePort",
    "StorageGatewayPort",
]
