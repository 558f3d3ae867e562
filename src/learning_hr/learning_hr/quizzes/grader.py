from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ..core.constants import QUIZ_PASS_SCORE
from ..core.exceptions import PreconditionViolation, ValidationError

UNANSWERED = -1


@dataclass(frozen=True)
class QuizGrade:
    correct_count: int
    total_questions: int
    score: int
    passed: bool


def normalize_answers(answers: Sequence[Any]) -> list[int]:
    """Coerce submitted answers to option indices; null means unanswered."""
    normalized = []
    for position, answer in enumerate(answers, start=1):
        if answer is None:
            normalized.append(UNANSWERED)
        elif isinstance(answer, int) and not isinstance(answer, bool):
            normalized.append(answer)
        else:
            raise ValidationError(f"Câu trả lời số {position} không hợp lệ")
    return normalized


def pad_answers(answers: Sequence[int], total_questions: int) -> list[int]:
    """Fill missing trailing answers with ``UNANSWERED``."""
    padded = list(answers)[:total_questions]
    return padded + [UNANSWERED] * (total_questions - len(padded))


def percent_score(correct_count: int, total_questions: int) -> int:
    # Half-up rounding of 100 * correct / total, in integers.
    return (200 * correct_count + total_questions) // (2 * total_questions)


def is_passing(score: int) -> bool:
    return score >= QUIZ_PASS_SCORE


def grade(answers: Sequence[int], answer_key: Sequence[int]) -> QuizGrade:
    if not answer_key:
        raise PreconditionViolation("Bài kiểm tra chưa có câu hỏi")
    if len(answers) != len(answer_key):
        raise PreconditionViolation("Số câu trả lời không khớp số câu hỏi")

    correct = sum(1 for given, expected in zip(answers, answer_key) if given == expected)
    score = percent_score(correct, len(answer_key))
    return QuizGrade(
        correct_count=correct,
        total_questions=len(answer_key),
        score=score,
        passed=is_passing(score),
    )
