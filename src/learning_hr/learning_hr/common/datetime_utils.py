from __future__ import annotations

import re
import calendar
from datetime import date, datetime, time

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def parse_hhmm(value: str) -> time:
    """Parse a HH:MM time-of-day (the format policy screens store)."""
    try:
        return datetime.strptime(str(value or "").strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError("Giờ không hợp lệ (HH:MM)")


def require_month(value: str) -> str:
    """Validate a YYYY-MM month key."""
    v = (value or "").strip()
    if not _MONTH_RE.match(v):
        raise ValidationError("Tháng không hợp lệ (YYYY-MM)")
    return v


def month_bounds(month: str) -> tuple[date, date]:
    """First and last calendar day of a YYYY-MM month."""
    year, mon = (int(p) for p in require_month(month).split("-"))
    return date(year, mon, 1), date(year, mon, calendar.monthrange(year, mon)[1])


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
