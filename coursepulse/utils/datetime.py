# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for CoursePulse.

Standardized datetime operations used by the aggregation engine.

Design Decisions:
-----------------
1. Backend timestamps are UTC (PostgreSQL TIMESTAMPTZ)
2. Naive datetimes coming from snapshots are treated as UTC
3. Calendar bucketing happens in an explicit display timezone
4. Chart labels use fixed English abbreviations, independent of locale

Usage:
------
    from coursepulse.utils.datetime import ensure_utc, to_zone

    local = to_zone(session.started_at, ZoneInfo("Europe/Paris"))
"""

from datetime import date, datetime, timezone, tzinfo

WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Timezone-aware datetime representing current UTC time.
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is None, returns None
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def to_zone(dt: datetime, tz: tzinfo) -> datetime:
    """Convert a datetime to the given timezone.

    Naive datetimes are interpreted as UTC first.

    Args:
        dt: Datetime to convert.
        tz: Target timezone.

    Returns:
        Timezone-aware datetime in tz.
    """
    return ensure_utc(dt).astimezone(tz)


def zone_of(dt: datetime) -> tzinfo:
    """Return the timezone carried by dt, or UTC for naive values."""
    return dt.tzinfo if dt.tzinfo is not None else timezone.utc


def shift_month(day: date, months: int) -> date:
    """Get the first day of the month N months away from day's month.

    Args:
        day: Any date within the reference month.
        months: Months to move (negative goes back in time).

    Returns:
        First day of the target month.

    Example:
        >>> shift_month(date(2026, 1, 31), -2)
        datetime.date(2025, 11, 1)
    """
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def weekday_label(day: date) -> str:
    """Weekday abbreviation for a date ("Mon" ... "Sun")."""
    return WEEKDAY_ABBREVIATIONS[day.weekday()]


def month_label(day: date) -> str:
    """Month abbreviation for a date ("Jan" ... "Dec")."""
    return MONTH_ABBREVIATIONS[day.month - 1]


def day_label(day: date) -> str:
    """Short day label such as "Sep 22"."""
    return f"{month_label(day)} {day.day:02d}"


def hour_label(hour: int) -> str:
    """Hour-of-day label such as "14:00"."""
    return f"{hour:02d}:00"
