"""Calendar-day boundaries, date keys and period windows.

All datetimes handled here are naive local wall-clock values. Aware values
coming from the document store are converted to local time by
``parse_datetime`` before any boundary is computed.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any


PERIOD_DAY = "day"
PERIOD_WEEK = "week"
PERIOD_MONTH = "month"
PERIOD_ALL = "all"
VALID_PERIODS = {PERIOD_DAY, PERIOD_WEEK, PERIOD_MONTH, PERIOD_ALL}


# ── Coercion ──────────────────────────────────────────────────


def _as_datetime(d: date | datetime) -> datetime:
    if isinstance(d, datetime):
        return d
    if isinstance(d, date):
        return datetime(d.year, d.month, d.day)
    raise TypeError(f"Expected date or datetime, got {type(d).__name__}")


def _to_local_naive(dt: datetime, tz: tzinfo | None = None) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(tz).replace(tzinfo=None)


def parse_datetime(value: Any, tz: tzinfo | None = None) -> datetime | None:
    """Coerce a stored date-like value into a naive local datetime.

    Accepts datetime/date objects, ISO-8601 strings, epoch milliseconds,
    ``{"seconds": .., "nanoseconds": ..}`` timestamp dicts and objects with a
    ``to_datetime()`` or ``toDate()`` method. Returns None for anything else.

    Aware values and epoch timestamps are converted to wall-clock time in
    *tz*, or in the host zone when *tz* is None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _to_local_naive(value, tz)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc).astimezone(tz).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return _to_local_naive(datetime.fromisoformat(s), tz)
        except ValueError:
            return None
    if isinstance(value, dict):
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
            nanos = value.get("nanoseconds", value.get("_nanoseconds", 0)) or 0
            try:
                millis = seconds * 1000 + int(nanos) / 1_000_000
            except (TypeError, ValueError):
                millis = seconds * 1000
            return parse_datetime(millis, tz)
        return None
    for attr in ("to_datetime", "toDate"):
        method = getattr(value, attr, None)
        if callable(method):
            try:
                converted = method()
            except Exception:
                return None
            if isinstance(converted, (datetime, date)):
                return parse_datetime(converted, tz)
            return None
    return None


# ── Day / week / month boundaries ─────────────────────────────


def start_of_day(d: date | datetime) -> datetime:
    return datetime.combine(_as_datetime(d).date(), time.min)


def end_of_day(d: date | datetime) -> datetime:
    return datetime.combine(_as_datetime(d).date(), time.max)


def start_of_week(d: date | datetime) -> datetime:
    """Monday 00:00 of the week containing *d* (Sunday belongs to the week before)."""
    day0 = start_of_day(d)
    return day0 - timedelta(days=day0.weekday())


def end_of_week(d: date | datetime) -> datetime:
    return end_of_day(start_of_week(d) + timedelta(days=6))


def start_of_month(d: date | datetime) -> datetime:
    dt = _as_datetime(d)
    return datetime(dt.year, dt.month, 1)


def end_of_month(d: date | datetime) -> datetime:
    """Last instant of the month: day 0 of the following month."""
    first = start_of_month(d)
    next_first = add_months(first, 1)
    return end_of_day(next_first - timedelta(days=1))


def date_key(d: date | datetime) -> str:
    """Canonical YYYY-MM-DD key of the local calendar day."""
    return start_of_day(d).strftime("%Y-%m-%d")


def is_same_day(a: date | datetime, b: date | datetime) -> bool:
    return _as_datetime(a).date() == _as_datetime(b).date()


# ── Navigation ────────────────────────────────────────────────


def add_days(d: date | datetime, days: int) -> datetime:
    return _as_datetime(d) + timedelta(days=days)


def add_months(d: date | datetime, months: int) -> datetime:
    """Shift by calendar months, clamping to the last day of shorter months."""
    dt = _as_datetime(d)
    index = dt.year * 12 + (dt.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last))


def period_window(period: str, anchor: date | datetime) -> tuple[datetime | None, datetime | None]:
    """Return the inclusive [start, end] window of *period* around *anchor*.

    ``all`` and unrecognised periods are unbounded: (None, None).
    """
    if period == PERIOD_DAY:
        return start_of_day(anchor), end_of_day(anchor)
    if period == PERIOD_WEEK:
        return start_of_week(anchor), end_of_week(anchor)
    if period == PERIOD_MONTH:
        return start_of_month(anchor), end_of_month(anchor)
    return None, None


def shift_period(period: str, anchor: date | datetime, steps: int = 1) -> datetime:
    """Move a ranking cursor *steps* periods forward (negative: backward)."""
    if period == PERIOD_DAY:
        return add_days(anchor, steps)
    if period == PERIOD_WEEK:
        return add_days(anchor, 7 * steps)
    if period == PERIOD_MONTH:
        return add_months(anchor, steps)
    return _as_datetime(anchor)


def month_grid(month: date | datetime) -> list[date | None]:
    """Days of *month* laid out Monday-first, padded with None before the 1st."""
    first = start_of_month(month)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    grid: list[date | None] = [None] * first.weekday()
    for day in range(1, days_in_month + 1):
        grid.append(date(first.year, first.month, day))
    return grid
