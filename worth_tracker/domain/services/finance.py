"""Domain services for net worth aggregates."""

from collections.abc import Iterable

from worth_tracker.domain.constants import (
    ITEM_TYPE_ASSET,
    ITEM_TYPE_LIABILITY,
)
from worth_tracker.domain.models import ItemDTO, ItemReport


def compute_item_report(
    username: str,
    items: Iterable[ItemDTO],
) -> ItemReport:
    """Compute net worth totals over a user's items in a single pass.

    Args:
        username: Name of the user owning the items.
        items: Items of the user in storage order.

    Returns:
        ItemReport: The items with net worth, asset and liability totals.
    """
    item_list = list(items)
    net_worth = 0
    asset_total = 0
    liability_total = 0

    for item in item_list:
        if item.item_type == ITEM_TYPE_ASSET:
            net_worth += item.value
            asset_total += item.value
        elif item.item_type == ITEM_TYPE_LIABILITY:
            net_worth -= item.value
            liability_total += item.value

    return ItemReport(
        username=username,
        items=item_list,
        net_worth=net_worth,
        asset_total=asset_total,
        liability_total=liability_total,
    )


__all__ = ["compute_item_report"]
