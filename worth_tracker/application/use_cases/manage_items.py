"""Use cases validating and mutating items and reporting net worth."""

from worth_tracker.application.ports.storage_gateway import ItemsStoragePort
from worth_tracker.application.use_cases.manage_users import UserService
from worth_tracker.domain.errors import ItemNotFoundError, WorthTrackerError
from worth_tracker.domain.models import ItemReport
from worth_tracker.domain.services.finance import compute_item_report
from worth_tracker.domain.services.validation import validate_item
from worth_tracker.infrastructure.logging.logger import get_app_logger


class ItemService:
    """Enforce item ownership and field constraints.

    Every item belongs to exactly one user, resolved by name through the
    ``UserService`` at write time.
    """

    def __init__(
        self,
        storage: ItemsStoragePort,
        user_service: UserService,
        logger=None,
    ) -> None:
        """Initialize the service.

        Args:
            storage: Port providing item storage primitives.
            user_service: Service resolving owners by name.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._storage = storage
        self._user_service = user_service
        self._logger = logger or get_app_logger()

    @staticmethod
    def validate_item(name: str, item_type: str, value: int) -> None:
        """Validate item fields; see ``validate_item``."""
        validate_item(name, item_type, value)

    def add_item(
        self,
        name: str,
        item_type: str,
        username: str,
        value: int,
    ) -> None:
        """Validate and store a new item for a user.

        Args:
            name: Item name.
            item_type: Asset or Liability.
            username: Name of the owning user.
            value: Non-negative integer amount.

        Raises:
            InvalidItemNameError: If the name is out of bounds.
            InvalidItemTypeError: If the type is unknown.
            InvalidItemValueError: If the value is not storable.
            UserNotFoundError: If the owner does not exist.
        """
        try:
            self.validate_item(name, item_type, value)
            owner = self._user_service.find_user(username)
        except WorthTrackerError as exc:
            self._logger.warning(f"Rejected new item '{name}': {exc}")
            raise

        self._storage.insert_item(owner.id, name, item_type, value)
        self._logger.info(
            f"Added {item_type} '{name}' ({value}) for user '{username}'"
        )

    def update_item(
        self,
        item_id: int,
        name: str,
        item_type: str,
        username: str,
        value: int,
    ) -> None:
        """Replace every field of an existing item.

        The item must exist before its fields are validated, so a bad payload
        against a missing id reports the missing item.

        Args:
            item_id: Identifier of the item to replace.
            name: Item name.
            item_type: Asset or Liability.
            username: Name of the owning user.
            value: Non-negative integer amount.

        Raises:
            ItemNotFoundError: If no item has the given id.
            InvalidItemNameError: If the name is out of bounds.
            InvalidItemTypeError: If the type is unknown.
            InvalidItemValueError: If the value is not storable.
            UserNotFoundError: If the owner does not exist.
        """
        try:
            if self._storage.find_item_by_id(item_id) is None:
                raise ItemNotFoundError(item_id)
            self.validate_item(name, item_type, value)
            owner = self._user_service.find_user(username)
        except WorthTrackerError as exc:
            self._logger.warning(f"Rejected update of item {item_id}: {exc}")
            raise

        self._storage.replace_item(item_id, owner.id, name, item_type, value)
        self._logger.info(f"Updated item {item_id} for user '{username}'")

    def delete_item(self, item_id: int) -> None:
        """Delete an item without existence or ownership checks."""
        self._storage.delete_item(item_id)
        self._logger.info(f"Deleted item {item_id}")

    def list_items(self, username: str) -> ItemReport:
        """Return a user's items with net worth totals.

        Args:
            username: Name of the user.

        Returns:
            ItemReport: Items plus net worth, asset and liability totals.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        owner = self._user_service.find_user(username)
        items = self._storage.list_items_by_owner(owner.id)
        report = compute_item_report(username, items)
        self._logger.info(
            f"Net worth computed for '{username}': "
            f"assets={report.asset_total}, "
            f"liabilities={report.liability_total}, "
            f"net_worth={report.net_worth}"
        )
        return report


__all__ = ["ItemService"]
