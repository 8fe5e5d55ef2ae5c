"""Repository protocol definitions for domain layer."""

from .storage import StorageGateway

__all__ = ["StorageGateway"]
