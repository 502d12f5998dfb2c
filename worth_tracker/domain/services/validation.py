"""Domain validation helpers."""

from worth_tracker.domain.constants import (
    ITEM_NAME_MAX_LENGTH,
    ITEM_NAME_MIN_LENGTH,
    ITEM_TYPES,
    MAX_ITEM_VALUE,
    USER_NAME_MAX_LENGTH,
    USER_NAME_MIN_LENGTH,
)
from worth_tracker.domain.errors import (
    InvalidItemNameError,
    InvalidItemTypeError,
    InvalidItemValueError,
    InvalidUserNameError,
)


def _length_violation(
    name: str,
    min_length: int,
    max_length: int,
) -> str | None:
    """Return the reason a name length is out of bounds, if any.

    Args:
        name: Name to check.
        min_length: Exclusive lower bound in code points.
        max_length: Exclusive upper bound in code points.

    Returns:
        str | None: Human readable reason, or None when the length is valid.
    """
    length = len(name)
    if length <= min_length:
        suffix = "character" if min_length == 1 else "characters"
        return f"Must be longer than {min_length} {suffix}."
    if length >= max_length:
        return f"Must be shorter than {max_length} characters."
    return None


def validate_user_name(name: str) -> None:
    """Ensure a user name length lies strictly between the bounds.

    Args:
        name: Candidate user name.

    Raises:
        InvalidUserNameError: If the name is too short or too long.
    """
    reason = _length_violation(
        name,
        USER_NAME_MIN_LENGTH,
        USER_NAME_MAX_LENGTH,
    )
    if reason:
        raise InvalidUserNameError(name, reason)


def validate_item(name: str, item_type: str, value: int) -> None:
    """Validate item fields without touching storage.

    Fields are checked in order: name, type, value.

    Args:
        name: Candidate item name.
        item_type: Candidate item type.
        value: Candidate item value.

    Raises:
        InvalidItemNameError: If the name is too short or too long.
        InvalidItemTypeError: If the type is not Asset or Liability.
        InvalidItemValueError: If the value is not a storable
            non-negative integer.
    """
    reason = _length_violation(
        name,
        ITEM_NAME_MIN_LENGTH,
        ITEM_NAME_MAX_LENGTH,
    )
    if reason:
        raise InvalidItemNameError(name, reason)

    if item_type not in ITEM_TYPES:
        raise InvalidItemTypeError(
            item_type,
            f"Must be {' or '.join(ITEM_TYPES)}.",
        )

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidItemValueError(value, "Must be a whole number.")
    if value < 0:
        raise InvalidItemValueError(value, "Must not be negative.")
    if value > MAX_ITEM_VALUE:
        raise InvalidItemValueError(
            value,
            "Must fit in a 64-bit integer.",
        )


__all__ = ["validate_user_name", "validate_item"]
