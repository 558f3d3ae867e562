from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_non_negative_int
from ..core.exceptions import PreconditionViolation
from .grader import grade, normalize_answers, pad_answers
from .model import QuizResult
from .repository import QuestionRepository, QuizResultRepository

logger = logging.getLogger(__name__)


class QuizAttemptPolicy:
    """Single active attempt per (user, lesson).

    A new attempt is only accepted after the previous result was discarded
    explicitly; history is not kept.
    """

    def __init__(self, results: QuizResultRepository, questions: Optional[QuestionRepository] = None):
        self._results = results
        self._questions = questions

    def has_active_result(self, user_id: str, lesson_id: str) -> bool:
        return self._results.get(user_id, lesson_id) is not None

    def active_result(self, user_id: str, lesson_id: str) -> Optional[QuizResult]:
        return self._results.get(user_id, lesson_id)

    def discard_result(self, user_id: str, lesson_id: str) -> None:
        self._results.delete(user_id, lesson_id)
        logger.info("quiz result %s_%s discarded", user_id, lesson_id)

    def answer_key_for(self, lesson_id: str) -> list[int]:
        if self._questions is None:
            raise PreconditionViolation("Không có nguồn câu hỏi")
        return [q.correct_answer for q in self._questions.list_for_lesson(lesson_id)]

    def submit(
        self,
        *,
        user_id: str,
        lesson_id: str,
        course_id: str,
        answers: Sequence[int],
        answer_key: Optional[Sequence[int]] = None,
        time_spent_seconds: int = 0,
        user_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> QuizResult:
        if self.has_active_result(user_id, lesson_id):
            raise PreconditionViolation("Bạn đã làm bài này; hãy xoá kết quả cũ để làm lại")

        answers = normalize_answers(answers)

        if answer_key is None:
            answer_key = self.answer_key_for(lesson_id)
            answers = pad_answers(answers, len(answer_key))

        result_grade = grade(list(answers), list(answer_key))
        result = QuizResult(
            user_id=user_id,
            lesson_id=lesson_id,
            course_id=course_id,
            answers=tuple(answers),
            correct_count=result_grade.correct_count,
            total_questions=result_grade.total_questions,
            score=result_grade.score,
            time_spent_seconds=require_non_negative_int(time_spent_seconds, "Thời gian làm bài"),
            completed_at=now or now_local(),
            user_name=user_name,
        )
        self._results.save(result)
        logger.info("quiz %s: %s/%s score=%s", result.key, result.correct_count, result.total_questions, result.score)
        return result

    def results_for_lesson(self, lesson_id: str) -> Sequence[QuizResult]:
        return self._results.list_for_lesson(lesson_id)
