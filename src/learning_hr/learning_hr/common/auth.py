from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def current_user_id() -> str:
    return str(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role"))


def login_required(view):
    """Session is populated by the SSO/auth layer in front of this app."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or session.get("role") not in {r.value for r in Role}:
            return jsonify({"success": False, "message": "Vui lòng đăng nhập để tiếp tục!"}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if session.get("role") not in allowed:
                return jsonify({"success": False, "message": "Bạn không có quyền"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator
