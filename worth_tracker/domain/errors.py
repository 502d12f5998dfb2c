"""Error taxonomy for the worth tracker core.

Every failure raised by the domain services or the Storage Gateway derives
from ``WorthTrackerError`` and keeps the offending field and a reason so that
adapters can build a user-facing message without parsing strings.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ByName:
    """Lookup key identifying a user by name."""

    name: str


@dataclass(frozen=True)
class ById:
    """Lookup key identifying a user by storage id."""

    user_id: int


UserLookupKey = ByName | ById


class WorthTrackerError(Exception):
    """Base class for every error raised by the core."""


class InvalidUserNameError(WorthTrackerError):
    """Raised when a user name is out of bounds or already taken."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"{name} is an invalid name: {reason}")


class UserNotFoundError(WorthTrackerError):
    """Raised when a user lookup yields no row."""

    def __init__(self, key: UserLookupKey) -> None:
        self.key = key
        super().__init__(self._describe(key))

    @staticmethod
    def _describe(key: UserLookupKey) -> str:
        if isinstance(key, ByName):
            return f"The user '{key.name}' does not exist."
        return f"The user with id '{key.user_id}' does not exist."


class InvalidItemNameError(WorthTrackerError):
    """Raised when an item name is out of bounds."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"{name} is an invalid name: {reason}")


class InvalidItemTypeError(WorthTrackerError):
    """Raised when an item type is neither Asset nor Liability."""

    def __init__(self, item_type: str, reason: str) -> None:
        self.item_type = item_type
        self.reason = reason
        super().__init__(f"{item_type} is an invalid item type: {reason}")


class InvalidItemValueError(WorthTrackerError):
    """Raised when an item value is not a storable non-negative integer."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid item value {value!r}: {reason}")


class ItemNotFoundError(WorthTrackerError):
    """Raised when an item id does not exist."""

    def __init__(self, item_id: int) -> None:
        self.item_id = item_id
        super().__init__(f"The item with id '{item_id}' does not exist.")


class StorageFailureError(WorthTrackerError):
    """Raised when the backing store fails an operation."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"Storage failure during {operation}: {detail}")


class StorageConstraintError(StorageFailureError):
    """Raised when the backing store rejects a write on a constraint."""


__all__ = [
    "ByName",
    "ById",
    "UserLookupKey",
    "WorthTrackerError",
    "InvalidUserNameError",
    "UserNotFoundError",
    "InvalidItemNameError",
    "InvalidItemTypeError",
    "InvalidItemValueError",
    "ItemNotFoundError",
    "StorageFailureError",
    "StorageConstraintError",
]
