"""Monotonic merge of video progress reports.

A stored ``LessonProgress`` never moves backwards: watched seconds only grow
and completion, once reached (more than 90% watched), stays set even when a
later report is lower (rewind, second device, stale tab).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import COMPLETION_RATIO, RESUME_MIN_SECONDS
from ..core.exceptions import PreconditionViolation
from .model import LessonProgress


@dataclass(frozen=True)
class ProgressMerge:
    progress: LessonProgress
    changed: bool


def should_complete(watched_seconds: float, total_seconds: float) -> bool:
    return watched_seconds / total_seconds > COMPLETION_RATIO


def merge(
    incoming_watched_seconds: float,
    total_seconds: float,
    previous: Optional[LessonProgress],
    *,
    user_id: str,
    lesson_id: str,
    course_id: str,
    now: Optional[datetime] = None,
) -> ProgressMerge:
    if not math.isfinite(total_seconds) or total_seconds <= 0:
        raise PreconditionViolation("Thời lượng video không hợp lệ")
    if not math.isfinite(incoming_watched_seconds):
        raise PreconditionViolation("Thời gian đã xem không hợp lệ")

    final_completed = (previous.completed if previous else False) or should_complete(
        incoming_watched_seconds, total_seconds
    )
    final_watched = max(math.floor(incoming_watched_seconds), previous.watched_seconds if previous else 0, 0)

    if previous and previous.completed == final_completed and previous.watched_seconds >= final_watched:
        return ProgressMerge(progress=previous, changed=False)

    progress = LessonProgress(
        user_id=user_id,
        lesson_id=lesson_id,
        course_id=course_id,
        watched_seconds=final_watched,
        total_seconds=math.ceil(total_seconds),
        completed=final_completed,
        last_watched_at=now,
    )
    return ProgressMerge(progress=progress, changed=True)


def resume_position(previous: Optional[LessonProgress]) -> int:
    """Where the player should seek on reload; short progress restarts at 0."""
    if previous and previous.watched_seconds > RESUME_MIN_SECONDS:
        return previous.watched_seconds
    return 0
