"""Domain constants for users and items."""

ITEM_TYPE_ASSET = "Asset"
ITEM_TYPE_LIABILITY = "Liability"

ITEM_TYPES = (
    ITEM_TYPE_ASSET,
    ITEM_TYPE_LIABILITY,
)

# Name lengths are exclusive bounds, counted in code points.
USER_NAME_MIN_LENGTH = 1
USER_NAME_MAX_LENGTH = 64
ITEM_NAME_MIN_LENGTH = 1
ITEM_NAME_MAX_LENGTH = 200

# Largest value a BIGINT column can hold.
MAX_ITEM_VALUE = 2**63 - 1


__all__ = [
    "ITEM_TYPE_ASSET",
    "ITEM_TYPE_LIABILITY",
    "ITEM_TYPES",
    "USER_NAME_MIN_LENGTH",
    "USER_NAME_MAX_LENGTH",
    "ITEM_NAME_MIN_LENGTH",
    "ITEM_NAME_MAX_LENGTH",
    "MAX_ITEM_VALUE",
]
