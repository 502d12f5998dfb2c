"""CLI adapter to create the worth tracker schema.

Bootstrap failure is fatal: the process exits with status 1 so that no
service starts against a store without tables.
"""

from worth_tracker.domain.errors import StorageFailureError
from worth_tracker.infrastructure.container import build_storage_gateway
from worth_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the schema bootstrap against the configured database."""
    logger = get_app_logger()
    gateway = build_storage_gateway()
    try:
        gateway.bootstrap()
    except StorageFailureError as exc:
        logger.critical(f"Schema bootstrap failed: {exc}")
        raise SystemExit(1) from exc
    finally:
        gateway.close()

    print("Worth tracker schema is ready.")


if __name__ == "__main__":  # pragma: no cover
    main()
