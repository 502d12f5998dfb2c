"""Fixtures for the application use cases."""

from unittest.mock import MagicMock

import pytest

from worth_tracker.application.use_cases.manage_items import ItemService
from worth_tracker.application.use_cases.manage_users import UserService
from worth_tracker.domain.errors import (
    ItemNotFoundError,
    StorageConstraintError,
)
from worth_tracker.domain.models import ItemDTO, UserDTO


class FakeStorageGateway:
    """In-memory stand-in for the SQL Storage Gateway."""

    def __init__(self) -> None:
        self.users: dict[int, UserDTO] = {}
        self.items: dict[int, ItemDTO] = {}
        self.calls: list[str] = []
        self._next_user_id = 1
        self._next_item_id = 1

    def bootstrap(self) -> None:
        self.calls.append("bootstrap")

    def close(self) -> None:
        self.calls.append("close")

    def insert_user(self, name: str) -> None:
        self.calls.append("insert_user")
        if any(user.name == name for user in self.users.values()):
            raise StorageConstraintError(
                "insert_user",
                "UNIQUE constraint failed: users.name",
            )
        self.users[self._next_user_id] = UserDTO(
            id=self._next_user_id,
            name=name,
        )
        self._next_user_id += 1

    def find_user_by_name(self, name: str) -> UserDTO | None:
        self.calls.append("find_user_by_name")
        for user in self.users.values():
            if user.name == name:
                return user
        return None

    def list_users(self) -> list[UserDTO]:
        return list(self.users.values())

    def insert_item(
        self,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        self.calls.append("insert_item")
        self.items[self._next_item_id] = ItemDTO(
            id=self._next_item_id,
            owner_id=owner_id,
            name=name,
            item_type=item_type,
            value=value,
        )
        self._next_item_id += 1

    def replace_item(
        self,
        item_id: int,
        owner_id: int,
        name: str,
        item_type: str,
        value: int,
    ) -> None:
        self.calls.append("replace_item")
        if item_id not in self.items:
            raise ItemNotFoundError(item_id)
        self.items[item_id] = ItemDTO(
            id=item_id,
            owner_id=owner_id,
            name=name,
            item_type=item_type,
            value=value,
        )

    def delete_item(self, item_id: int) -> None:
        self.calls.append("delete_item")
        self.items.pop(item_id, None)

    def list_items_by_owner(self, owner_id: int) -> list[ItemDTO]:
        return [
            item for item in self.items.values() if item.owner_id == owner_id
        ]

    def find_item_by_id(self, item_id: int) -> ItemDTO | None:
        self.calls.append("find_item_by_id")
        return self.items.get(item_id)


@pytest.fixture
def storage() -> FakeStorageGateway:
    return FakeStorageGateway()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def user_service(storage, logger) -> UserService:
    return UserService(storage, logger=logger)


@pytest.fixture
def item_service(storage, user_service, logger) -> ItemService:
    return ItemService(storage, user_service, logger=logger)
