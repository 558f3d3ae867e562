"""Field codecs shared by the document repositories.

Stored documents are plain JSON: datetimes are ISO-8601 strings (offset kept
when present), dates are ``YYYY-MM-DD``, times ``HH:MM`` and decimals strings,
so reading back a written record reproduces identical values.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError

_MISSING = object()


def require(doc: Mapping[str, Any], field: str) -> Any:
    value = doc.get(field, _MISSING)
    if value is _MISSING or value is None:
        raise ValidationError(f"Bản ghi thiếu trường bắt buộc: {field}")
    return value


def encode_datetime(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def decode_datetime(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Thời điểm không hợp lệ: {value!r}")


def encode_date(value: date) -> str:
    return value.isoformat()


def decode_date(value: Any) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Ngày không hợp lệ: {value!r}")


def encode_time(value: time) -> str:
    return value.strftime("%H:%M")


def decode_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(str(value), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Giờ không hợp lệ: {value!r}")


def encode_decimal(value: Optional[Decimal]) -> Optional[str]:
    return str(value) if value is not None else None


def decode_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Số không hợp lệ: {value!r}")


def decode_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Trường {field} phải là số nguyên")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Trường {field} phải là số nguyên")
