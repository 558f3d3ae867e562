from datetime import datetime

import pytest

from src.learning_hr.learning_hr.core.exceptions import PreconditionViolation, ValidationError
from src.learning_hr.learning_hr.quizzes.document_repository import (
    DocumentQuestionRepository,
    DocumentQuizResultRepository,
    result_from_document,
    result_to_document,
)
from src.learning_hr.learning_hr.quizzes.service import QuizAttemptPolicy


def _policy(store):
    return QuizAttemptPolicy(DocumentQuizResultRepository(store), DocumentQuestionRepository(store))


def _submit(policy, answers, key=(0, 1, 2, 3)):
    return policy.submit(
        user_id="u1",
        lesson_id="l1",
        course_id="c1",
        answers=answers,
        answer_key=key,
        time_spent_seconds=95,
        now=datetime(2024, 3, 4, 10, 0),
    )


def test_second_attempt_requires_discard(store):
    policy = _policy(store)
    first = _submit(policy, [0, 1, 0, 3])
    assert first.score == 75

    with pytest.raises(PreconditionViolation):
        _submit(policy, [0, 1, 2, 3])
    assert policy.active_result("u1", "l1") == first

    policy.discard_result("u1", "l1")
    assert not policy.has_active_result("u1", "l1")
    assert _submit(policy, [0, 1, 2, 3]).score == 100


def test_answer_key_from_question_bank(store):
    store.put("questions", "q2", {"id": "q2", "lessonId": "l1", "options": ["x", "y"], "correctAnswer": 1, "order": 2})
    store.put("questions", "q1", {"id": "q1", "lessonId": "l1", "options": ["x", "y"], "correctAnswer": 0, "order": 1})
    policy = _policy(store)

    result = policy.submit(user_id="u1", lesson_id="l1", course_id="c1", answers=[0])

    assert result.answers == (0, -1)
    assert result.correct_count == 1
    assert result.score == 50


def test_result_document_round_trip(store):
    result = _submit(_policy(store), [0, 1, 0, 3])

    doc = result_to_document(result)
    assert doc["id"] == "u1_l1"
    assert doc["timeSpent"] == 95
    assert result_from_document(doc) == result


def test_null_answer_is_graded_as_unanswered(store):
    store.put("questions", "q1", {"id": "q1", "lessonId": "l1", "options": ["x", "y"], "correctAnswer": 1, "order": 1})
    store.put("questions", "q2", {"id": "q2", "lessonId": "l1", "options": ["x", "y"], "correctAnswer": 0, "order": 2})
    policy = _policy(store)

    result = policy.submit(user_id="u1", lesson_id="l1", course_id="c1", answers=[1, None])

    assert result.answers == (1, -1)
    assert result.correct_count == 1


def test_string_answer_rejected_without_saving(store):
    policy = _policy(store)

    with pytest.raises(ValidationError):
        _submit(policy, [0, "1", 2, 3])
    assert not policy.has_active_result("u1", "l1")
