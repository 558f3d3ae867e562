from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

Document = dict[str, Any]


class RecordStore(Protocol):
    """Document store collaborator: JSON-like records keyed by string ids."""

    def get(self, collection: str, key: str) -> Optional[Document]:
        raise NotImplementedError

    def put(self, collection: str, key: str, record: Mapping[str, Any]) -> None:
        """Upsert ``record`` under ``key``."""

        raise NotImplementedError

    def query(self, collection: str, filter: Mapping[str, Any]) -> Sequence[Document]:
        """Return every record whose fields equal all ``filter`` items."""

        raise NotImplementedError

    def delete(self, collection: str, key: str) -> None:
        raise NotImplementedError


def matches(record: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    return all(record.get(field) == value for field, value in filter.items())
