"""
Small helpers shared by request schemas.
"""

from __future__ import annotations

import calendar
import datetime as dt
from typing import Any


def blank_to_none(value: Any) -> Any:
    # HTML forms send "" for untouched optional inputs.
    if isinstance(value, str) and not value.strip():
        return None
    return value


def add_one_month(day: dt.date) -> dt.date:
    year = day.year + (1 if day.month == 12 else 0)
    month = 1 if day.month == 12 else day.month + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def parse_iso_date(value: str, *, today: dt.date | None = None) -> str:
    """
    Validate a `YYYY-MM-DD` date that is at most one month ahead of today.
    """
    try:
        parsed = dt.date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError("must be a date in YYYY-MM-DD format") from exc

    limit = add_one_month(today or dt.date.today())
    if parsed > limit:
        raise ValueError("cannot be more than one month in the future")
    return parsed.isoformat()


def max_model_year(today: dt.date | None = None) -> int:
    return (today or dt.date.today()).year + 1
