from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall, fetchone
from .record_store import Document, RecordStore, matches


def _load(body: Any) -> Document:
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        return json.loads(body)
    return dict(body)


class MySQLRecordStore(RecordStore):
    """``RecordStore`` over a single ``documents`` table holding JSON bodies."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, collection: str, key: str) -> Optional[Document]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT body FROM documents WHERE collection=%s AND doc_key=%s",
                (collection, key),
            )
            row = fetchone(cur)
            return _load(row["body"]) if row else None

    def put(self, collection: str, key: str, record: Mapping[str, Any]) -> None:
        body = json.dumps(dict(record), ensure_ascii=False, sort_keys=True)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO documents (collection, doc_key, body)
                VALUES (%s, %s, %s)
                ON DUPLICATE KEY UPDATE body=VALUES(body)
                """,
                (collection, key, body),
            )

    def query(self, collection: str, filter: Mapping[str, Any]) -> Sequence[Document]:
        # Equality filters are applied after decoding; collections stay small
        # (one row per employee-day / user-lesson).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT body FROM documents WHERE collection=%s ORDER BY doc_key",
                (collection,),
            )
            records = [_load(r["body"]) for r in fetchall(cur)]
        return [r for r in records if matches(r, filter)]

    def delete(self, collection: str, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM documents WHERE collection=%s AND doc_key=%s",
                (collection, key),
            )
