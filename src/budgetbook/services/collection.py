"""Storage-backed record collection shared by the ledgers and the goal tracker."""

from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Protocol, TypeVar

from ..domain.repositories.storage import StorageGateway
from ..errors import StorageDecodeError
from ..logging_config import get_logger
from .identifiers import IdFactory, new_identifier

logger = get_logger("services.collection")


class StoredRecord(Protocol):
    id: str

    def to_record(self) -> dict[str, Any]:  # pragma: no cover - interface
        ...


RecordT = TypeVar("RecordT", bound=StoredRecord)


class RecordCollection(Generic[RecordT]):
    """Ordered records loaded from one storage key and written back whole.

    Subclasses set ``storage_key`` and implement ``_decode``.
    """

    storage_key: str = ""

    def __init__(self, storage: StorageGateway, *, id_factory: IdFactory = new_identifier):
        self._storage = storage
        self._id_factory = id_factory
        self._records: list[RecordT] = self._load()

    def _decode(self, record: Mapping[str, Any]) -> RecordT:  # pragma: no cover - abstract
        raise NotImplementedError

    def _load(self) -> list[RecordT]:
        try:
            stored = self._storage.get(self.storage_key)
        except StorageDecodeError as exc:
            logger.warning(
                "Discarding unreadable collection",
                extra={"storage_key": self.storage_key, "reason": exc.reason},
            )
            return []
        if stored is None:
            return []
        try:
            return [self._decode(item) for item in stored]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            logger.warning(
                "Discarding malformed collection",
                extra={"storage_key": self.storage_key, "reason": repr(exc)},
            )
            return []

    def _save(self) -> None:
        self._storage.set(self.storage_key, [record.to_record() for record in self._records])

    def _next_id(self) -> str:
        return self._id_factory()

    def _append(self, record: RecordT) -> RecordT:
        self._records.append(record)
        self._save()
        logger.debug("Record added", extra={"storage_key": self.storage_key, "record_id": record.id})
        return record

    def get_all(self) -> list[RecordT]:
        """Return a snapshot of every record in insertion order."""
        return list(self._records)

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        return next((r for r in self._records if r.id == record_id), None)

    def remove(self, record_id: str) -> None:
        """Drop the record with ``record_id``; unknown ids are ignored."""
        self._records = [r for r in self._records if r.id != record_id]
        self._save()

    def __len__(self) -> int:
        return len(self._records)
