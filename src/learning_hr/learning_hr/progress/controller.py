from __future__ import annotations

import math

from flask import Flask

from ..common.auth import current_user_id, login_required
from ..common.http import json_body, ok, to_json
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container


def _number(data: dict, field: str) -> float:
    try:
        value = float(data[field])
    except (KeyError, TypeError, ValueError):
        raise ValidationError(f"{field} không hợp lệ")
    if not math.isfinite(value):
        raise ValidationError(f"{field} không hợp lệ")
    return value


def register(app: Flask, container: Container) -> None:
    @app.route("/api/progress/tick", methods=["POST"], endpoint="progress_tick")
    @login_required
    def progress_tick():
        data = json_body()
        result = container.progress_service.record_tick(
            user_id=current_user_id(),
            course_id=require_non_empty(str(data.get("course_id") or ""), "course_id"),
            lesson_id=require_non_empty(str(data.get("lesson_id") or ""), "lesson_id"),
            watched_seconds=_number(data, "watched_seconds"),
            total_seconds=_number(data, "total_seconds"),
        )
        return ok(result.progress, changed=result.changed)

    @app.route("/api/progress/<lesson_id>/resume", methods=["GET"], endpoint="progress_resume")
    @login_required
    def progress_resume(lesson_id: str):
        position = container.progress_service.resume_position(user_id=current_user_id(), lesson_id=lesson_id)
        return ok({"lesson_id": lesson_id, "position": position})

    @app.route("/api/progress/course/<course_id>", methods=["GET"], endpoint="progress_course")
    @login_required
    def progress_course(course_id: str):
        lessons = container.progress_service.course_progress(user_id=current_user_id(), course_id=course_id)
        return ok({lesson_id: {**to_json(p), "percent": round(p.percent, 1)} for lesson_id, p in lessons.items()})
