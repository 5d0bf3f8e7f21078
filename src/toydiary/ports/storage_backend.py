"""Key-value storage interface."""

from typing import Protocol


class StorageBackend(Protocol):
    """Interface for durable string storage addressed by a fixed key."""

    def get(self, key: str) -> str | None:
        """Read the value stored under a key. Returns None if not found."""
        ...

    def set(self, key: str, value: str) -> bool:
        """Write/overwrite the value under a key. Returns False on failure."""
        ...
