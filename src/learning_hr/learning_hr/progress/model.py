from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def progress_key(user_id: str, lesson_id: str) -> str:
    return f"{user_id}_{lesson_id}"


@dataclass(frozen=True)
class LessonProgress:
    """Tiến độ xem video của một học viên trong một bài học."""

    user_id: str
    lesson_id: str
    course_id: str
    watched_seconds: int
    total_seconds: int
    completed: bool = False
    last_watched_at: Optional[datetime] = None

    @property
    def key(self) -> str:
        return progress_key(self.user_id, self.lesson_id)

    @property
    def percent(self) -> float:
        return min(100.0, self.watched_seconds * 100.0 / self.total_seconds) if self.total_seconds else 0.0
