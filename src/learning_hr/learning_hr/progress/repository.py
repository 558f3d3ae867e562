from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LessonProgress


class ProgressRepository(Protocol):
    def get(self, user_id: str, lesson_id: str) -> Optional[LessonProgress]:
        raise NotImplementedError

    def save(self, progress: LessonProgress) -> None:
        raise NotImplementedError

    def list_for_course(self, user_id: str, course_id: str) -> Sequence[LessonProgress]:
        raise NotImplementedError
