"""Use cases validating and mutating user records."""

from worth_tracker.application.ports.storage_gateway import UsersStoragePort
from worth_tracker.domain.errors import (
    ByName,
    InvalidUserNameError,
    StorageConstraintError,
    UserNotFoundError,
)
from worth_tracker.domain.models import UserDTO
from worth_tracker.domain.services.validation import validate_user_name
from worth_tracker.infrastructure.logging.logger import get_app_logger


DUPLICATE_USER_REASON = "There is already a user by that name."


class UserService:
    """Enforce user name constraints and uniqueness.

    Users are created and listed here; they are never updated or deleted.
    """

    def __init__(self, storage: UsersStoragePort, logger=None) -> None:
        """Initialize the service.

        Args:
            storage: Port providing user storage primitives.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._logger = logger or get_app_logger()

    def find_user(self, name: str) -> UserDTO:
        """Return the user with the given name.

        Args:
            name: Name of the user.

        Returns:
            UserDTO: The stored user.

        Raises:
            UserNotFoundError: If no user has that name.
        """
        user = self._storage.find_user_by_name(name)
        if user is None:
            raise UserNotFoundError(ByName(name))
        return user

    def add_user(self, name: str) -> None:
        """Validate and store a new user.

        The uniqueness check and the insert are not one transaction; a
        concurrent insert of the same name is rejected by the storage
        ``UNIQUE`` constraint and reported the same way.

        Args:
            name: Name of the new user.

        Raises:
            InvalidUserNameError: If the name is out of bounds or taken.
        """
        try:
            validate_user_name(name)
        except InvalidUserNameError as exc:
            self._logger.warning(f"Rejected user name: {exc}")
            raise

        if self._storage.find_user_by_name(name) is not None:
            self._logger.warning(f"Rejected duplicate user name '{name}'")
            raise InvalidUserNameError(name, DUPLICATE_USER_REASON)

        try:
            self._storage.insert_user(name)
        except StorageConstraintError as exc:
            self._logger.warning(
                f"Storage rejected duplicate user name '{name}'"
            )
            raise InvalidUserNameError(name, DUPLICATE_USER_REASON) from exc

        self._logger.info(f"Added user '{name}'")

    def list_users(self) -> list[UserDTO]:
        """Return every stored user."""
        return self._storage.list_users()


__all__ = ["UserService", "DUPLICATE_USER_REASON"]
