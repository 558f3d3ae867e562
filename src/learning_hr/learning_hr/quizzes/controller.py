from __future__ import annotations

from flask import Flask

from ..common.auth import current_user_id, login_required, roles_required
from ..common.http import json_body, ok
from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container
from ..quizzes.grader import is_passing


def register(app: Flask, container: Container) -> None:
    @app.route("/api/quizzes/<lesson_id>/result", methods=["GET"], endpoint="quiz_result")
    @login_required
    def quiz_result(lesson_id: str):
        result = container.quiz_policy.active_result(current_user_id(), lesson_id)
        return ok(result, passed=bool(result and is_passing(result.score)))

    @app.route("/api/quizzes/<lesson_id>/submit", methods=["POST"], endpoint="quiz_submit")
    @login_required
    def quiz_submit(lesson_id: str):
        data = json_body()
        answers = data.get("answers")
        if not isinstance(answers, list):
            raise ValidationError("answers phải là danh sách")
        user = container.users_repo.get_by_id(current_user_id())
        result = container.quiz_policy.submit(
            user_id=current_user_id(),
            lesson_id=lesson_id,
            course_id=require_non_empty(str(data.get("course_id") or ""), "course_id"),
            answers=answers,
            time_spent_seconds=data.get("time_spent", 0),
            user_name=user.display_name if user else None,
        )
        return ok(result, 201, passed=is_passing(result.score))

    @app.route("/api/quizzes/<lesson_id>/result", methods=["DELETE"], endpoint="quiz_discard")
    @login_required
    def quiz_discard(lesson_id: str):
        container.quiz_policy.discard_result(current_user_id(), lesson_id)
        return ok()

    @app.route("/api/quizzes/<lesson_id>/results", methods=["GET"], endpoint="quiz_results")
    @roles_required(Role.TEACHER, Role.ADMIN)
    def quiz_results(lesson_id: str):
        return ok(container.quiz_policy.results_for_lesson(lesson_id))
