"""Domain package for business rules and core models."""

from .constants import (
    ITEM_TYPE_ASSET,
    ITEM_TYPE_LIABILITY,
    ITEM_TYPES,
)
from .errors import (
    ById,
    ByName,
    InvalidItemNameError,
    InvalidItemTypeError,
    InvalidItemValueError,
    InvalidUserNameError,
    ItemNotFoundError,
    StorageConstraintError,
    StorageFailureError,
    UserNotFoundError,
    WorthTrackerError,
)
from .models import ItemDTO, ItemReport, UserDTO
from .services import compute_item_report, validate_item, validate_user_name

__all__ = [
    "ITEM_TYPE_ASSET",
    "ITEM_TYPE_LIABILITY",
    "ITEM_TYPES",
    "ById",
    "ByName",
    "InvalidItemNameError",
    "InvalidItemTypeError",
    "InvalidItemValueError",
    "InvalidUserNameError",
    "ItemNotFoundError",
    "StorageConstraintError",
    "StorageFailureError",
    "UserNotFoundError",
    "WorthTrackerError",
    "ItemDTO",
    "ItemReport",
    "UserDTO",
    "compute_item_report",
    "validate_item",
    "validate_user_name",
]
