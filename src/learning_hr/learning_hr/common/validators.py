from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_non_negative_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số nguyên")
    if number < 0:
        raise ValidationError(f"{field_name} không được âm")
    return number


def normalize_address_list(addresses) -> list[str]:
    """Strip blanks and duplicates, keeping the first occurrence order."""
    out: list[str] = []
    for raw in addresses or []:
        ip = str(raw).strip()
        if ip and ip not in out:
            out.append(ip)
    return out
