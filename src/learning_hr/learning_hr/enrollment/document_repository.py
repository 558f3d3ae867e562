from __future__ import annotations

from typing import Optional, Sequence

from ..database.documents import require
from ..database.record_store import Document, RecordStore
from .model import CourseMembership
from .repository import CourseRepository

COLLECTION = "courses"


def membership_from_document(doc: Document) -> CourseMembership:
    return CourseMembership(
        course_id=str(require(doc, "id")),
        students=tuple(str(s) for s in doc.get("students") or []),
        pending_students=tuple(str(s) for s in doc.get("pendingStudents") or []),
        title=doc.get("title"),
        teacher_id=doc.get("teacherId"),
    )


class DocumentCourseRepository(CourseRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self, course_id: str) -> Optional[CourseMembership]:
        doc = self._store.get(COLLECTION, course_id)
        return membership_from_document(doc) if doc else None

    def save_membership(self, course: CourseMembership) -> None:
        # Keep the rest of the course document (description, lessons, ...).
        doc = self._store.get(COLLECTION, course.course_id) or {"id": course.course_id}
        doc["students"] = list(course.students)
        doc["pendingStudents"] = list(course.pending_students)
        if course.title is not None:
            doc["title"] = course.title
        if course.teacher_id is not None:
            doc["teacherId"] = course.teacher_id
        self._store.put(COLLECTION, course.course_id, doc)

    def list_all(self) -> Sequence[CourseMembership]:
        courses = [membership_from_document(d) for d in self._store.query(COLLECTION, {})]
        courses.sort(key=lambda c: c.course_id)
        return courses
