from __future__ import annotations

import dataclasses
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

from flask import jsonify, request

from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    NetworkUnavailable,
    NotOnCompanyNetwork,
    StoreUnavailable,
    UploadFailed,
    UploadTimeout,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (AuthorizationError, 403),
    (NotOnCompanyNetwork, 403),
    (UploadTimeout, 504),
    (UploadFailed, 502),
    (StoreUnavailable, 503),
    (NetworkUnavailable, 503),
)


def error_status(exc: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    return 400


def to_json(value: Any) -> Any:
    """Dataclasses/enums/decimals/datetimes to JSON-safe values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, (frozenset, set)):
        return sorted(to_json(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_json(v) for k, v in value.items()}
    return value


def ok(data: Any = None, status: int = 200, **extra):
    body = {"success": True, "data": to_json(data)}
    body.update(extra)
    return jsonify(body), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Dữ liệu gửi lên không hợp lệ")
    return data
