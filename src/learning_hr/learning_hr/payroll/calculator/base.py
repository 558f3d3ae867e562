from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.exceptions import InvalidPolicy

CENT = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def require_base_salary(base: Decimal) -> Decimal:
    base = Decimal(base)
    if base < 0:
        raise InvalidPolicy("Lương cơ bản không được âm")
    return base


def require_count(value: int, field_name: str) -> int:
    if int(value) < 0:
        raise InvalidPolicy(f"{field_name} không được âm")
    return int(value)


def daily_rate(base: Decimal, working_days: int) -> Decimal:
    """Salary of one working day; ``working_days`` must be at least 1."""
    if int(working_days) < 1:
        raise InvalidPolicy("Số ngày công phải >= 1")
    return Decimal(base) / Decimal(int(working_days))


def settle(base: Decimal, deduction: Decimal) -> tuple[Decimal, Decimal]:
    """Round the deduction to cents and derive the take-home, never below 0."""
    deduction = to_money(deduction)
    final = max(Decimal("0"), Decimal(base) - deduction)
    return deduction, to_money(final)
