from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def quiz_result_key(user_id: str, lesson_id: str) -> str:
    return f"{user_id}_{lesson_id}"


@dataclass(frozen=True)
class Question:
    question_id: str
    lesson_id: str
    text: str
    options: tuple[str, ...]
    correct_answer: int
    order: int = 0


@dataclass(frozen=True)
class QuizResult:
    """Kết quả làm bài; mỗi (học viên, bài học) chỉ có một kết quả hiệu lực."""

    user_id: str
    lesson_id: str
    course_id: str
    answers: tuple[int, ...]
    correct_count: int
    total_questions: int
    score: int
    time_spent_seconds: int
    completed_at: datetime
    user_name: Optional[str] = None

    @property
    def key(self) -> str:
        return quiz_result_key(self.user_id, self.lesson_id)
