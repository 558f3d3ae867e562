from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CourseMembership


class CourseRepository(Protocol):
    def get(self, course_id: str) -> Optional[CourseMembership]:
        raise NotImplementedError

    def save_membership(self, course: CourseMembership) -> None:
        """Write ``students``/``pendingStudents`` together in one update."""

        raise NotImplementedError

    def list_all(self) -> Sequence[CourseMembership]:
        raise NotImplementedError
