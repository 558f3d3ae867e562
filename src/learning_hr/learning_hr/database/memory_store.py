from __future__ import annotations

import copy
from typing import Any, Mapping, Optional, Sequence

from .record_store import Document, RecordStore, matches


class InMemoryRecordStore(RecordStore):
    """Dict-backed store used by tests and the ``memory`` development backend.

    Records are deep-copied in and out so callers never share mutable state
    with the store.
    """

    def __init__(self, initial: Optional[dict[str, dict[str, Document]]] = None):
        self._collections: dict[str, dict[str, Document]] = copy.deepcopy(initial or {})

    def get(self, collection: str, key: str) -> Optional[Document]:
        record = self._collections.get(collection, {}).get(key)
        return copy.deepcopy(record) if record is not None else None

    def put(self, collection: str, key: str, record: Mapping[str, Any]) -> None:
        self._collections.setdefault(collection, {})[key] = copy.deepcopy(dict(record))

    def query(self, collection: str, filter: Mapping[str, Any]) -> Sequence[Document]:
        items = self._collections.get(collection, {})
        return [copy.deepcopy(r) for r in items.values() if matches(r, filter)]

    def delete(self, collection: str, key: str) -> None:
        self._collections.get(collection, {}).pop(key, None)

    def keys(self, collection: str) -> list[str]:
        return sorted(self._collections.get(collection, {}))
