"""Exceptions raised by the storage layer."""

from __future__ import annotations


class StorageDecodeError(ValueError):
    """A stored collection could not be decoded back into Python values."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Stored collection {key!r} is unreadable: {reason}")
        self.key = key
        self.reason = reason
