from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ValidationError
from ..database.documents import decode_datetime, decode_int, encode_datetime, require
from ..database.record_store import Document, RecordStore
from .model import LessonProgress, progress_key
from .repository import ProgressRepository

COLLECTION = "progress"


def progress_to_document(progress: LessonProgress) -> Document:
    return {
        "id": progress.key,
        "userId": progress.user_id,
        "courseId": progress.course_id,
        "lessonId": progress.lesson_id,
        "watchedSeconds": progress.watched_seconds,
        "totalSeconds": progress.total_seconds,
        "completed": progress.completed,
        "lastWatchedAt": encode_datetime(progress.last_watched_at),
    }


def progress_from_document(doc: Document) -> LessonProgress:
    completed = require(doc, "completed")
    if not isinstance(completed, bool):
        raise ValidationError("Trường completed phải là boolean")
    return LessonProgress(
        user_id=str(require(doc, "userId")),
        lesson_id=str(require(doc, "lessonId")),
        course_id=str(require(doc, "courseId")),
        watched_seconds=decode_int(require(doc, "watchedSeconds"), "watchedSeconds"),
        total_seconds=decode_int(require(doc, "totalSeconds"), "totalSeconds"),
        completed=completed,
        last_watched_at=decode_datetime(doc.get("lastWatchedAt")),
    )


class DocumentProgressRepository(ProgressRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self, user_id: str, lesson_id: str) -> Optional[LessonProgress]:
        doc = self._store.get(COLLECTION, progress_key(user_id, lesson_id))
        return progress_from_document(doc) if doc else None

    def save(self, progress: LessonProgress) -> None:
        self._store.put(COLLECTION, progress.key, progress_to_document(progress))

    def list_for_course(self, user_id: str, course_id: str) -> Sequence[LessonProgress]:
        docs = self._store.query(COLLECTION, {"userId": user_id, "courseId": course_id})
        return [progress_from_document(d) for d in docs]
