from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Question, QuizResult


class QuizResultRepository(Protocol):
    def get(self, user_id: str, lesson_id: str) -> Optional[QuizResult]:
        raise NotImplementedError

    def save(self, result: QuizResult) -> None:
        raise NotImplementedError

    def delete(self, user_id: str, lesson_id: str) -> None:
        raise NotImplementedError

    def list_for_lesson(self, lesson_id: str) -> Sequence[QuizResult]:
        raise NotImplementedError


class QuestionRepository(Protocol):
    def list_for_lesson(self, lesson_id: str) -> Sequence[Question]:
        """Questions of a lesson ordered by ``order``."""

        raise NotImplementedError
