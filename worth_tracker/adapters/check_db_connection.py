"""Simple CLI to validate the database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the configured store.
"""

from worth_tracker.infrastructure.container import build_database_adapter
from worth_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    try:
        engine = adapter.get_engine()
        logger.info(f"Worth tracker DB: {engine.url}")

        with engine.connect() as conn:
            conn.exec_driver_sql("SELECT 1")
    finally:
        adapter.dispose()
    logger.info("Connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
