from __future__ import annotations

import base64
import binascii

from flask import Flask, request

from ..common.auth import current_role, current_user_id, login_required, roles_required
from ..common.datetime_utils import require_month
from ..common.http import ok
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container


def _photo_bytes() -> bytes:
    """Photo from a multipart ``photo`` file or a JSON ``photo`` data URL."""
    upload = request.files.get("photo")
    if upload is not None:
        data = upload.read()
    else:
        payload = request.get_json(silent=True) or {}
        raw = str(payload.get("photo") or "")
        if "," in raw and raw.startswith("data:"):
            raw = raw.split(",", 1)[1]
        try:
            data = base64.b64decode(raw, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationError("Ảnh không hợp lệ")
    if not data:
        raise ValidationError("Vui lòng chụp ảnh trước khi chấm công")
    return data


def register(app: Flask, container: Container) -> None:
    staff_only = roles_required(Role.STAFF, Role.ADMIN)

    @app.route("/api/attendance/network", methods=["GET"], endpoint="attendance_network")
    @staff_only
    def attendance_network():
        return ok(container.attendance_service.network_status())

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @staff_only
    def attendance_check_in():
        record = container.attendance_service.check_in(current_user_id(), photo=_photo_bytes())
        return ok(record, 201, message="Check-in thành công!")

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @staff_only
    def attendance_check_out():
        record = container.attendance_service.check_out(current_user_id(), photo=_photo_bytes())
        return ok(record, message="Check-out thành công!")

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @staff_only
    def attendance_today():
        return ok(container.attendance_service.today_record(current_user_id()))

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @staff_only
    def attendance_history():
        days = request.args.get("days", default=7, type=int)
        return ok(container.attendance_service.history(current_user_id(), days=days))

    @app.route("/api/attendance/stats/<month>", methods=["GET"], endpoint="attendance_stats")
    @login_required
    def attendance_stats(month: str):
        employee_id = request.args.get("employee_id") or current_user_id()
        if employee_id != current_user_id() and current_role() != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")
        return ok(container.attendance_service.monthly_stats(employee_id, require_month(month)))
