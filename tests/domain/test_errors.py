"""Tests for the error taxonomy."""

from worth_tracker.domain.errors import (
    ById,
    ByName,
    InvalidItemTypeError,
    InvalidUserNameError,
    ItemNotFoundError,
    StorageConstraintError,
    StorageFailureError,
    UserNotFoundError,
    WorthTrackerError,
)


def test_user_not_found_describes_lookup_by_name() -> None:
    error = UserNotFoundError(ByName("alice"))

    assert error.key == ByName("alice")
    assert str(error) == "The user 'alice' does not exist."


def test_user_not_found_describes_lookup_by_id() -> None:
    error = UserNotFoundError(ById(7))

    assert error.key.user_id == 7
    assert str(error) == "The user with id '7' does not exist."


def test_errors_keep_structured_details() -> None:
    name_error = InvalidUserNameError("a", "Must be longer than 1 character.")
    type_error = InvalidItemTypeError("Cash", "Must be Asset or Liability.")
    missing = ItemNotFoundError(42)

    assert name_error.name == "a"
    assert str(name_error) == (
        "a is an invalid name: Must be longer than 1 character."
    )
    assert type_error.item_type == "Cash"
    assert missing.item_id == 42
    assert str(missing) == "The item with id '42' does not exist."


def test_storage_errors_share_the_base_class() -> None:
    constraint = StorageConstraintError("insert_user", "UNIQUE failed")

    assert isinstance(constraint, StorageFailureError)
    assert isinstance(constraint, WorthTrackerError)
    assert constraint.operation == "insert_user"
    assert "insert_user" in str(constraint)
