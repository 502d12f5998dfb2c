"""Domain services package."""

from .finance import compute_item_report
from .validation import validate_item, validate_user_name

__all__ = [
    "compute_item_report",
    "validate_item",
    "validate_user_name",
]
