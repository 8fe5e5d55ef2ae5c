"""Storage gateway implementations.

Both gateways keep collections as JSON text so that what a ledger reads back is
exactly what a fresh process would read from disk.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Callable, ContextManager, Optional

from sqlmodel import Session, select

from ...errors import StorageDecodeError
from ...models.stored_collection import StoredCollection


def encode_collection(value: Any) -> str:
    """Serialize a collection to JSON text."""
    return json.dumps(value, ensure_ascii=False)


def decode_collection(key: str, payload: str) -> Any:
    """Parse JSON text written by ``encode_collection``."""
    try:
        return json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise StorageDecodeError(key, str(exc)) from exc


class SQLModelStorageGateway:
    """SQLModel-backed gateway; one ``stored_collection`` row per key."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[Any]:
        with self.session_factory() as session:
            row = session.exec(select(StoredCollection).where(StoredCollection.key == key)).first()
            if row is None:
                return None
            payload = row.payload
        return decode_collection(key, payload)

    def set(self, key: str, value: Any) -> None:
        payload = encode_collection(value)
        with self.session_factory() as session:
            row = session.exec(select(StoredCollection).where(StoredCollection.key == key)).first()
            if row:
                row.payload = payload
                row.updated_at = datetime.now(timezone.utc)
            else:
                row = StoredCollection(key=key, payload=payload)
            session.add(row)
            session.commit()

    def remove(self, key: str) -> None:
        with self.session_factory() as session:
            row = session.exec(select(StoredCollection).where(StoredCollection.key == key)).first()
            if row:
                session.delete(row)
                session.commit()


class InMemoryStorageGateway:
    """Process-local gateway holding JSON text in a dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._payloads: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        payload = self._payloads.get(key)
        if payload is None:
            return None
        return decode_collection(key, payload)

    def set(self, key: str, value: Any) -> None:
        self._payloads[key] = encode_collection(value)

    def remove(self, key: str) -> None:
        self._payloads.pop(key, None)

    def raw(self, key: str) -> Optional[str]:
        """Return the stored JSON text for ``key`` without decoding it."""
        return self._payloads.get(key)

    def keys(self) -> list[str]:
        return sorted(self._payloads)


__all__ = [
    "InMemoryStorageGateway",
    "SQLModelStorageGateway",
    "decode_collection",
    "encode_collection",
]
