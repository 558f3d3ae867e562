from __future__ import annotations

from typing import Optional, Sequence

from ..core.exceptions import ValidationError
from ..database.documents import decode_datetime, decode_int, encode_datetime, require
from ..database.record_store import Document, RecordStore
from .model import Question, QuizResult, quiz_result_key
from .repository import QuestionRepository, QuizResultRepository

RESULTS = "quizResults"
QUESTIONS = "questions"


def result_to_document(result: QuizResult) -> Document:
    return {
        "id": result.key,
        "userId": result.user_id,
        "userName": result.user_name,
        "lessonId": result.lesson_id,
        "courseId": result.course_id,
        "answers": list(result.answers),
        "correctCount": result.correct_count,
        "totalQuestions": result.total_questions,
        "score": result.score,
        "timeSpent": result.time_spent_seconds,
        "completedAt": encode_datetime(result.completed_at),
    }


def result_from_document(doc: Document) -> QuizResult:
    answers = require(doc, "answers")
    if not isinstance(answers, list):
        raise ValidationError("Trường answers phải là danh sách")
    return QuizResult(
        user_id=str(require(doc, "userId")),
        lesson_id=str(require(doc, "lessonId")),
        course_id=str(require(doc, "courseId")),
        answers=tuple(decode_int(a, "answers") for a in answers),
        correct_count=decode_int(require(doc, "correctCount"), "correctCount"),
        total_questions=decode_int(require(doc, "totalQuestions"), "totalQuestions"),
        score=decode_int(require(doc, "score"), "score"),
        time_spent_seconds=decode_int(doc.get("timeSpent") or 0, "timeSpent"),
        completed_at=decode_datetime(require(doc, "completedAt")),
        user_name=doc.get("userName"),
    )


def question_from_document(doc: Document) -> Question:
    return Question(
        question_id=str(require(doc, "id")),
        lesson_id=str(require(doc, "lessonId")),
        text=str(doc.get("question") or ""),
        options=tuple(str(o) for o in doc.get("options") or []),
        correct_answer=decode_int(require(doc, "correctAnswer"), "correctAnswer"),
        order=decode_int(doc.get("order") or 0, "order"),
    )


class DocumentQuizResultRepository(QuizResultRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self, user_id: str, lesson_id: str) -> Optional[QuizResult]:
        doc = self._store.get(RESULTS, quiz_result_key(user_id, lesson_id))
        return result_from_document(doc) if doc else None

    def save(self, result: QuizResult) -> None:
        self._store.put(RESULTS, result.key, result_to_document(result))

    def delete(self, user_id: str, lesson_id: str) -> None:
        self._store.delete(RESULTS, quiz_result_key(user_id, lesson_id))

    def list_for_lesson(self, lesson_id: str) -> Sequence[QuizResult]:
        results = [result_from_document(d) for d in self._store.query(RESULTS, {"lessonId": lesson_id})]
        results.sort(key=lambda r: r.completed_at, reverse=True)
        return results


class DocumentQuestionRepository(QuestionRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_for_lesson(self, lesson_id: str) -> Sequence[Question]:
        questions = [question_from_document(d) for d in self._store.query(QUESTIONS, {"lessonId": lesson_id})]
        questions.sort(key=lambda q: q.order)
        return questions
