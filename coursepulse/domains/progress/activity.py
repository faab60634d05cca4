# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Learner activity series.

Data behind the learner progress chart:
- weekly: lessons completed and hours spent on each of the last 7 days
- monthly: the same per calendar month over the last N months
- subject: completed lessons per course category

Only completed records with a completion timestamp count, and only for
lessons the relation index attributes to a course. Hours are the summed
lesson durations.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta, timezone, tzinfo
from typing import Any

from coursepulse.domains.progress.index import RelationIndex
from coursepulse.domains.progress.models import ProgressRecord
from coursepulse.domains.progress.personal import ensure_single_user
from coursepulse.utils.datetime import month_label, shift_month, to_zone, weekday_label

UNKNOWN_CATEGORY = "Unknown"
WEEKLY_DAYS = 7


@dataclass(frozen=True)
class ActivityPoint:
    """Completed lessons and hours within one period."""

    label: str
    start: date
    lessons: int = 0
    hours: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "start": self.start.isoformat(),
            "lessons": self.lessons,
            "hours": self.hours,
        }


@dataclass(frozen=True)
class SubjectShare:
    """Completed lessons in one course category."""

    name: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class ActivitySeries:
    """Complete learner activity chart data."""

    weekly: list[ActivityPoint] = field(default_factory=list)
    monthly: list[ActivityPoint] = field(default_factory=list)
    subject: list[SubjectShare] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.weekly or self.monthly or self.subject)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "weekly": [point.to_dict() for point in self.weekly],
            "monthly": [point.to_dict() for point in self.monthly],
            "subject": [share.to_dict() for share in self.subject],
        }


def _hours(minutes: int) -> float:
    return round(minutes / 60, 1)


def build_activity_series(
    index: RelationIndex,
    user_id: str,
    records: Iterable[ProgressRecord],
    today: date,
    months: int = 6,
    tz: tzinfo | None = None,
) -> ActivitySeries:
    """Build a learner's activity series.

    Args:
        index: Relation index of the snapshot.
        user_id: The learner.
        records: The learner's progress records.
        today: Last calendar day of the series, in tz.
        months: Number of calendar months in the monthly series.
        tz: Timezone for calendar days. Defaults to UTC.

    Returns:
        ActivitySeries; empty when there are no records or no counted lessons.

    Raises:
        MixedUserRecordsError: If records contain other users' rows.
    """
    records = ensure_single_user(user_id, records)
    if not records or not index.included:
        return ActivitySeries()

    tz = tz or timezone.utc
    completions: list[tuple[date, str]] = []
    for record in records:
        if not record.is_completed or record.completed_at is None:
            continue
        if index.course_of(record.lesson_id) is None:
            continue
        completions.append((to_zone(record.completed_at, tz).date(), record.lesson_id))

    first_day = today - timedelta(days=WEEKLY_DAYS - 1)
    daily_lessons: Counter[date] = Counter()
    daily_minutes: Counter[date] = Counter()
    monthly_lessons: Counter[date] = Counter()
    monthly_minutes: Counter[date] = Counter()
    categories: Counter[str] = Counter()

    for day, lesson_id in completions:
        minutes = index.lessons[lesson_id].duration_minutes
        if first_day <= day <= today:
            daily_lessons[day] += 1
            daily_minutes[day] += minutes
        month = day.replace(day=1)
        monthly_lessons[month] += 1
        monthly_minutes[month] += minutes
        course = index.courses[index.course_of(lesson_id)]
        categories[course.category or UNKNOWN_CATEGORY] += 1

    weekly = []
    for offset in range(WEEKLY_DAYS):
        day = first_day + timedelta(days=offset)
        weekly.append(
            ActivityPoint(
                label=weekday_label(day),
                start=day,
                lessons=daily_lessons[day],
                hours=_hours(daily_minutes[day]),
            )
        )

    monthly = []
    for offset in range(months - 1, -1, -1):
        month = shift_month(today, -offset)
        monthly.append(
            ActivityPoint(
                label=month_label(month),
                start=month,
                lessons=monthly_lessons[month],
                hours=_hours(monthly_minutes[month]),
            )
        )

    subject = [SubjectShare(name, value) for name, value in categories.items()]
    return ActivitySeries(weekly=weekly, monthly=monthly, subject=subject)
