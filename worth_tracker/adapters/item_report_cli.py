"""CLI adapter printing a user's items and net worth."""

import os
import sys

from worth_tracker.domain.errors import WorthTrackerError
from worth_tracker.infrastructure.container import (
    build_services,
    build_storage_gateway,
)
from worth_tracker.infrastructure.logging.logger import get_app_logger


def _resolve_username(argv: list[str]) -> str | None:
    """Return the username from the arguments or WORTH_TRACKER_USER."""
    if argv:
        return argv[0]
    return os.getenv("WORTH_TRACKER_USER") or None


def main(argv: list[str] | None = None) -> None:
    """Print the item report of one user."""
    logger = get_app_logger()
    username = _resolve_username(sys.argv[1:] if argv is None else argv)
    if not username:
        logger.warning(
            "A username is required: pass it as an argument "
            "or set WORTH_TRACKER_USER."
        )
        return

    gateway = build_storage_gateway()
    try:
        _, item_service = build_services(gateway)
        report = item_service.list_items(username)
    except WorthTrackerError as exc:
        logger.error(str(exc))
        return
    finally:
        gateway.close()

    print(f"Items for {report.username}")
    for item in report.items:
        print(f"  [{item.id}] {item.name} ({item.item_type}): {item.value}")
    print(
        f"assets={report.asset_total}, "
        f"liabilities={report.liability_total}, "
        f"net_worth={report.net_worth}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
