"""Tests for the domain validation helpers."""

import pytest

from worth_tracker.domain.errors import (
    InvalidItemNameError,
    InvalidItemTypeError,
    InvalidItemValueError,
    InvalidUserNameError,
)
from worth_tracker.domain.services.validation import (
    validate_item,
    validate_user_name,
)


@pytest.mark.parametrize("length", [2, 10, 63])
def test_validate_user_name_accepts_lengths_inside_bounds(length: int) -> None:
    """Names of 2 to 63 code points are valid."""
    validate_user_name("a" * length)


@pytest.mark.parametrize("name", ["", "a", "a" * 64, "a" * 65])
def test_validate_user_name_rejects_lengths_at_or_outside_bounds(
    name: str,
) -> None:
    """Empty, single-character and 64+ names are rejected."""
    with pytest.raises(InvalidUserNameError) as excinfo:
        validate_user_name(name)

    assert excinfo.value.name == name
    assert excinfo.value.reason


def test_validate_user_name_counts_code_points_not_bytes() -> None:
    """Multi-byte characters count once each."""
    validate_user_name("é" * 63)
    with pytest.raises(InvalidUserNameError):
        validate_user_name("😀" * 64)


def test_validate_user_name_reasons_name_the_bound() -> None:
    with pytest.raises(InvalidUserNameError) as too_short:
        validate_user_name("a")
    with pytest.raises(InvalidUserNameError) as too_long:
        validate_user_name("a" * 64)

    assert too_short.value.reason == "Must be longer than 1 character."
    assert too_long.value.reason == "Must be shorter than 64 characters."


def test_validate_item_accepts_valid_fields() -> None:
    validate_item("Savings", "Asset", 0)
    validate_item("Mortgage", "Liability", 250_000)
    validate_item("x" * 199, "Asset", 2**63 - 1)


@pytest.mark.parametrize("name", ["", "a", "a" * 200])
def test_validate_item_rejects_bad_names(name: str) -> None:
    with pytest.raises(InvalidItemNameError):
        validate_item(name, "Asset", 10)


@pytest.mark.parametrize("item_type", ["Cash", "asset", "", "LIABILITY"])
def test_validate_item_rejects_unknown_types(item_type: str) -> None:
    """Types are matched exactly against Asset and Liability."""
    with pytest.raises(InvalidItemTypeError) as excinfo:
        validate_item("Savings", item_type, 10)

    assert excinfo.value.item_type == item_type
    assert "Asset" in excinfo.value.reason
    assert "Liability" in excinfo.value.reason


@pytest.mark.parametrize("value", [-1, 2**63, 1.5, "10", True])
def test_validate_item_rejects_unstorable_values(value) -> None:
    with pytest.raises(InvalidItemValueError) as excinfo:
        validate_item("Savings", "Asset", value)

    assert excinfo.value.value == value


def test_validate_item_checks_name_before_type_and_value() -> None:
    """The first failing field in name, type, value order is reported."""
    with pytest.raises(InvalidItemNameError):
        validate_item("", "Cash", -1)
    with pytest.raises(InvalidItemTypeError):
        validate_item("Savings", "Cash", -1)
