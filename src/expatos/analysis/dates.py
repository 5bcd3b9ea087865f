"""Whole-day date arithmetic used by the dependency rules.

Expiry dates are calendar days anchored at midnight UTC. Differences are
rounded up to the next whole day, so a document expiring later today still
counts as one day away.
"""

import calendar
import math
from datetime import date, datetime, time, timezone

SECONDS_PER_DAY = 24 * 60 * 60


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Days from ``start`` to ``end``, rounded up; negative when ``end`` is earlier."""
    delta = _as_datetime(end) - _as_datetime(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def days_until_expiry(expiry_date: date, now: date | datetime) -> int:
    return days_between(now, expiry_date)


def is_expired(expiry_date: date, now: date | datetime) -> bool:
    return days_until_expiry(expiry_date, now) <= 0


def to_date(value: date | datetime) -> date:
    """Calendar day of ``value`` in UTC."""
    if isinstance(value, datetime):
        return _as_datetime(value).astimezone(timezone.utc).date()
    return value


def add_months(value: date, months: int) -> date:
    """Shift ``value`` by calendar months, clamping to the last day of the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def format_date(value: date) -> str:
    """Long US form, e.g. ``March 15, 2025``."""
    return f"{value:%B} {value.day}, {value.year}"
