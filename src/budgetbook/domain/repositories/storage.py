"""Storage gateway protocol."""

from __future__ import annotations

from typing import Any, Optional, Protocol


class StorageGateway(Protocol):
    """Persists whole named collections of JSON-serializable values."""

    def get(self, key: str) -> Optional[Any]:
        """Return the collection stored under ``key``, or None if never written."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Replace the collection stored under ``key``."""
        ...

    def remove(self, key: str) -> None:
        """Forget ``key``; a missing key is not an error."""
        ...
