"""Helpers for ``YYYY-MM`` reporting periods.

Record dates are ``YYYY-MM-DD`` strings and a period selects records by plain
string prefix, so ``"2024-3"`` does not match ``"2024-03-15"``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def matches_period(record_date: str, period: Optional[str]) -> bool:
    """Return True when ``record_date`` falls in ``period``; no period matches all."""

    if not period:
        return True
    return record_date.startswith(period)


def period_of(record_date: str) -> str:
    """Return the ``YYYY-MM`` period a ``YYYY-MM-DD`` date belongs to."""
    return record_date[:7]


def is_valid_period(period: str) -> bool:
    return bool(_PERIOD_RE.match(period))


def current_month(today: Optional[date] = None) -> str:
    """Return the period containing ``today`` (defaults to the current date)."""

    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def recent_months(count: int, today: Optional[date] = None) -> list[str]:
    """Return the last ``count`` periods, most recent first."""

    today = today or date.today()
    year, month = today.year, today.month
    periods: list[str] = []
    for _ in range(max(0, count)):
        periods.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return periods
