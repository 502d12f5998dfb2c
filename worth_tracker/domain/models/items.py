"""Domain models for items and item reports."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ItemDTO:
    """Serializable representation of a stored item.

    Attributes:
        id: Storage-assigned identifier.
        owner_id: Identifier of the owning user.
        name: Display name of the item.
        item_type: Either Asset or Liability.
        value: Non-negative integer amount.
    """

    id: int
    owner_id: int
    name: str
    item_type: str
    value: int


@dataclass(frozen=True)
class ItemReport:
    """Items of a user along with their net worth figures.

    Attributes:
        username: Name of the user the report belongs to.
        items: Items in storage order.
        net_worth: Assets minus liabilities.
        asset_total: Sum of asset values.
        liability_total: Sum of liability values.
    """

    username: str
    items: list[ItemDTO] = field(default_factory=list)
    net_worth: int = 0
    asset_total: int = 0
    liability_total: int = 0


__all__ = ["ItemDTO", "ItemReport"]
