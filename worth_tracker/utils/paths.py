"""Filesystem path helpers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the directory runtime files such as logs are written under.

    Returns:
        Path: The repository root when running from a checkout, otherwise
        the current working directory.
    """
    checkout_root = Path(__file__).resolve().parents[2]
    if (checkout_root / "pyproject.toml").is_file():
        return checkout_root
    return Path.cwd()


__all__ = ["get_project_root"]
