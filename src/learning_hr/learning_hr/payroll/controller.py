from __future__ import annotations

from flask import Flask, request

from ..common.auth import current_role, roles_required
from ..common.http import json_body, ok
from ..core.enums import PayrollMethod, Role
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    admin_only = roles_required(Role.ADMIN)

    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_list")
    @admin_only
    def payroll_list(month: str):
        try:
            method = PayrollMethod(request.args.get("method", PayrollMethod.ATTENDANCE.value))
        except ValueError:
            raise ValidationError("Phương pháp tính lương không hợp lệ")
        return ok(container.payroll_service.list_month(month, method=method))

    @app.route("/api/payroll/<month>/<employee_id>/preview", methods=["GET"], endpoint="payroll_preview")
    @admin_only
    def payroll_preview(month: str, employee_id: str):
        return ok(container.payroll_service.preview_monthly(employee_id, month))

    @app.route("/api/payroll/<month>/<employee_id>/snapshot", methods=["POST"], endpoint="payroll_snapshot")
    @admin_only
    def payroll_snapshot(month: str, employee_id: str):
        record = container.payroll_service.save_snapshot(
            current_role=current_role(),
            employee_id=employee_id,
            month=month,
        )
        return ok(record, message="Đã lưu bảng lương")

    @app.route("/api/payroll/<month>/<employee_id>/manual", methods=["POST"], endpoint="payroll_manual")
    @admin_only
    def payroll_manual(month: str, employee_id: str):
        data = json_body()
        record = container.payroll_service.save_manual_entry(
            current_role=current_role(),
            employee_id=employee_id,
            month=month,
            absent_days=data.get("absent_days", 0),
            late_days=data.get("late_days", 0),
            note=data.get("note") or "",
        )
        return ok(record, message="Đã lưu bảng lương")
