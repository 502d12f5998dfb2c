"""Tests for the UserService."""

from unittest.mock import MagicMock

import pytest

from worth_tracker.application.use_cases.manage_users import (
    DUPLICATE_USER_REASON,
    UserService,
)
from worth_tracker.domain.errors import (
    ByName,
    InvalidUserNameError,
    StorageConstraintError,
    StorageFailureError,
    UserNotFoundError,
)
from worth_tracker.domain.models import UserDTO


@pytest.mark.parametrize("length", [2, 32, 63])
def test_add_user_succeeds_once_per_name(user_service, length: int) -> None:
    """A valid name is accepted once; the second attempt is rejected."""
    name = "u" * length

    user_service.add_user(name)
    with pytest.raises(InvalidUserNameError) as excinfo:
        user_service.add_user(name)

    assert excinfo.value.reason == DUPLICATE_USER_REASON
    assert [user.name for user in user_service.list_users()] == [name]


@pytest.mark.parametrize("name", ["", "a", "a" * 64, "a" * 65])
def test_add_user_rejects_bad_lengths_without_touching_storage(
    user_service,
    storage,
    name: str,
) -> None:
    with pytest.raises(InvalidUserNameError):
        user_service.add_user(name)

    assert storage.calls == []


def test_add_user_reports_storage_constraint_as_invalid_name(logger) -> None:
    """A concurrent insert that wins the race still yields InvalidUserName."""
    storage = MagicMock()
    storage.find_user_by_name.return_value = None
    storage.insert_user.side_effect = StorageConstraintError(
        "insert_user",
        "UNIQUE constraint failed: users.name",
    )
    service = UserService(storage, logger=logger)

    with pytest.raises(InvalidUserNameError) as excinfo:
        service.add_user("alice")

    assert excinfo.value.reason == DUPLICATE_USER_REASON
    assert isinstance(excinfo.value.__cause__, StorageConstraintError)


def test_add_user_propagates_other_storage_failures(logger) -> None:
    storage = MagicMock()
    storage.find_user_by_name.side_effect = StorageFailureError(
        "find_user_by_name",
        "database is locked",
    )
    service = UserService(storage, logger=logger)

    with pytest.raises(StorageFailureError):
        service.add_user("alice")

    storage.insert_user.assert_not_called()


def test_add_user_logs_success(user_service, logger) -> None:
    user_service.add_user("alice")

    logger.info.assert_called_once_with("Added user 'alice'")


def test_find_user_returns_stored_user(user_service) -> None:
    user_service.add_user("alice")

    assert user_service.find_user("alice") == UserDTO(id=1, name="alice")


def test_find_user_raises_with_name_key(user_service) -> None:
    with pytest.raises(UserNotFoundError) as excinfo:
        user_service.find_user("ghost")

    assert excinfo.value.key == ByName("ghost")


def test_find_user_does_not_mask_storage_failures(logger) -> None:
    """A failing lookup is a storage failure, not a missing user."""
    storage = MagicMock()
    storage.find_user_by_name.side_effect = StorageFailureError(
        "find_user_by_name",
        "disk I/O error",
    )
    service = UserService(storage, logger=logger)

    with pytest.raises(StorageFailureError):
        service.find_user("alice")


def test_list_users_returns_empty_list(user_service) -> None:
    assert user_service.list_users() == []
