"""Concrete storage gateway implementations."""

from .storage import InMemoryStorageGateway, SQLModelStorageGateway

__all__ = [
    "InMemoryStorageGateway",
    "SQLModelStorageGateway",
]
