"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from worth_tracker.infrastructure.logging.logger import get_app_logger


DEFAULT_DATABASE_URL = "sqlite:///worth_tracker.db"
DEFAULT_ENDPOINT_FILE = "database.txt"
DEFAULT_BUSY_TIMEOUT = 5.0


@dataclass(frozen=True)
class WorthTrackerSettings:
    """Settings for the relational store.

    Attributes:
        database_url: SQLAlchemy URL of the store.
        busy_timeout: Seconds SQLite waits on a locked database.
    """

    database_url: str = DEFAULT_DATABASE_URL
    busy_timeout: float = DEFAULT_BUSY_TIMEOUT

    @classmethod
    def from_env(cls) -> "WorthTrackerSettings":
        """Build settings from environment variables.

        ``WORTH_TRACKER_DB_URL`` wins over the endpoint file named by
        ``WORTH_TRACKER_DB_FILE``; the local SQLite file is the fallback.

        Returns:
            WorthTrackerSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = os.getenv("WORTH_TRACKER_DB_URL", "").strip()
        if not database_url:
            endpoint_file = os.getenv(
                "WORTH_TRACKER_DB_FILE",
                DEFAULT_ENDPOINT_FILE,
            )
            database_url = (
                cls._read_endpoint_file(endpoint_file, logger=logger)
                or DEFAULT_DATABASE_URL
            )
        busy_timeout = cls._parse_timeout(
            os.getenv("WORTH_TRACKER_DB_TIMEOUT"),
            logger=logger,
        )
        return cls(database_url=database_url, busy_timeout=busy_timeout)

    @staticmethod
    def _read_endpoint_file(raw_path: str, logger) -> str | None:
        """Read the database endpoint from a text file.

        Args:
            raw_path: Path to the endpoint file.
            logger: Logger used for warnings.

        Returns:
            str | None: Database URL, or None when the file is missing or
            empty. A bare filesystem path becomes a SQLite URL.
        """
        path = Path(raw_path).expanduser()
        if not path.is_file():
            return None
        endpoint = path.read_text(encoding="utf-8").strip()
        if not endpoint:
            logger.warning(f"Database endpoint file is empty: {path}")
            return None
        if "://" in endpoint:
            return endpoint
        return f"sqlite:///{Path(endpoint).expanduser().resolve()}"

    @staticmethod
    def _parse_timeout(raw_timeout: str | None, logger) -> float:
        """Parse the busy timeout, falling back to the default.

        Args:
            raw_timeout: Raw timeout string in seconds.
            logger: Logger used for warnings.

        Returns:
            float: Timeout in seconds.
        """
        if not raw_timeout:
            return DEFAULT_BUSY_TIMEOUT
        try:
            timeout = float(raw_timeout)
        except ValueError:
            logger.warning(
                f"Invalid WORTH_TRACKER_DB_TIMEOUT '{raw_timeout}'; "
                f"using {DEFAULT_BUSY_TIMEOUT}"
            )
            return DEFAULT_BUSY_TIMEOUT
        if timeout < 0:
            logger.warning(
                f"Negative WORTH_TRACKER_DB_TIMEOUT '{raw_timeout}'; "
                f"using {DEFAULT_BUSY_TIMEOUT}"
            )
            return DEFAULT_BUSY_TIMEOUT
        return timeout


__all__ = [
    "WorthTrackerSettings",
    "DEFAULT_DATABASE_URL",
    "DEFAULT_ENDPOINT_FILE",
    "DEFAULT_BUSY_TIMEOUT",
]
