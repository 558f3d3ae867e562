from __future__ import annotations

from flask import Flask

from ..common.auth import current_role, current_user_id, login_required, roles_required
from ..common.http import ok
from ..core.enums import Role
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.enrollment_service

    @app.route("/api/courses/<course_id>/enrollment", methods=["GET"], endpoint="enrollment_state")
    @login_required
    def enrollment_state(course_id: str):
        return ok({"state": svc.state_of(course_id=course_id, user_id=current_user_id())})

    @app.route("/api/courses/<course_id>/request", methods=["POST"], endpoint="enrollment_request")
    @login_required
    def enrollment_request(course_id: str):
        state = svc.request(current_role=current_role(), course_id=course_id, user_id=current_user_id())
        return ok({"state": state})

    @app.route("/api/courses/<course_id>/cancel", methods=["POST"], endpoint="enrollment_cancel")
    @login_required
    def enrollment_cancel(course_id: str):
        state = svc.cancel(current_role=current_role(), course_id=course_id, user_id=current_user_id())
        return ok({"state": state})

    @app.route("/api/courses/<course_id>/students/<user_id>/<action>", methods=["POST"], endpoint="enrollment_decide")
    @roles_required(Role.ADMIN)
    def enrollment_decide(course_id: str, user_id: str, action: str):
        handlers = {"approve": svc.approve, "reject": svc.reject, "admit": svc.admit}
        handler = handlers.get(action)
        if handler is None:
            return ok(None, 404, message="Hành động không hợp lệ")
        state = handler(current_role=current_role(), course_id=course_id, user_id=user_id)
        return ok({"state": state})

    @app.route("/api/courses/<course_id>/students/<user_id>", methods=["DELETE"], endpoint="enrollment_remove")
    @login_required
    def enrollment_remove(course_id: str, user_id: str):
        state = svc.unenroll(
            current_role=current_role(),
            current_user_id=current_user_id(),
            course_id=course_id,
            user_id=user_id,
        )
        return ok({"state": state})

    @app.route("/api/enrollment/pending", methods=["GET"], endpoint="enrollment_pending")
    @roles_required(Role.ADMIN)
    def enrollment_pending():
        return ok(svc.pending_requests())
