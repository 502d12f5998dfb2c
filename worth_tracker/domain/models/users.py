"""Domain models for users."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserDTO:
    """Serializable representation of a stored user."""

    id: int
    name: str


__all__ = ["UserDTO"]
