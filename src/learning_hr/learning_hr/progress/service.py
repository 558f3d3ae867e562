from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from .model import LessonProgress
from .repository import ProgressRepository
from .tracker import ProgressMerge, merge, resume_position

logger = logging.getLogger(__name__)


class ProgressService:
    """Use case: persist playback ticks with a re-read-and-merge cycle."""

    def __init__(self, progress: ProgressRepository):
        self._progress = progress

    def record_tick(
        self,
        *,
        user_id: str,
        course_id: str,
        lesson_id: str,
        watched_seconds: float,
        total_seconds: float,
        now: Optional[datetime] = None,
    ) -> ProgressMerge:
        # Always merge against the stored copy, not a cached one: another
        # device may have written since this player loaded.
        previous = self._progress.get(user_id, lesson_id)
        result = merge(
            watched_seconds,
            total_seconds,
            previous,
            user_id=user_id,
            lesson_id=lesson_id,
            course_id=course_id,
            now=now or now_local(),
        )
        if not result.changed:
            logger.debug("progress %s_%s unchanged; skip write", user_id, lesson_id)
            return result

        self._progress.save(result.progress)
        return result

    def resume_position(self, *, user_id: str, lesson_id: str) -> int:
        return resume_position(self._progress.get(user_id, lesson_id))

    def course_progress(self, *, user_id: str, course_id: str) -> dict[str, LessonProgress]:
        return {p.lesson_id: p for p in self._progress.list_for_course(user_id, course_id)}
