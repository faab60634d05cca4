# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Bucket plans for the engagement chart.

A plan fixes the ordered buckets of a time range and decides which
bucket, if any, a session start belongs to:

- 24h: 24 hour-of-day buckets. Only the hour counts; the calendar date
  is ignored, so 14:05 yesterday and 14:40 today share "14:00".
- 7d: 7 daily buckets, the calendar days ending today.
- 30d: 4 weekly buckets of 7 days ending today.
- 90d: 3 monthly buckets of 30 days ending today.

Date-window buckets are rolling and fixed-width: bucket i covers the
half-open date interval [start_i, start_i + width). Sessions outside the
plan are dropped.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Callable

from coursepulse.domains.exceptions import InvalidTimeRangeError
from coursepulse.utils.datetime import day_label, hour_label, weekday_label

HOURS_PER_DAY = 24


class TimeRange(str, Enum):
    """Engagement chart range token."""

    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"

    @classmethod
    def parse(cls, token: "str | TimeRange") -> "TimeRange":
        """Parse a range token such as "7d".

        Raises:
            InvalidTimeRangeError: If the token is not a supported range.
        """
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError as e:
            raise InvalidTimeRangeError(str(token), [item.value for item in cls]) from e


@dataclass(frozen=True)
class BucketWindow:
    """One bucket of a plan.

    Attributes:
        label: Chart axis label.
        start: First calendar day of the window; None for hour-of-day buckets.
        end: Day after the last calendar day; None for hour-of-day buckets.
    """

    label: str
    start: date | None = None
    end: date | None = None


class BucketPlan(ABC):
    """Ordered buckets of a range and the rule assigning sessions to them."""

    def __init__(self, windows: list[BucketWindow]) -> None:
        self.windows = windows

    def __len__(self) -> int:
        return len(self.windows)

    @abstractmethod
    def locate(self, moment: datetime) -> int | None:
        """Index of the bucket holding moment, or None when outside the plan.

        Args:
            moment: Session start, already in the plan's timezone.
        """
        pass


class HourOfDayPlan(BucketPlan):
    """24 buckets keyed by hour of day."""

    def __init__(self) -> None:
        super().__init__([BucketWindow(hour_label(hour)) for hour in range(HOURS_PER_DAY)])

    def locate(self, moment: datetime) -> int | None:
        return moment.hour


class DateWindowPlan(BucketPlan):
    """Consecutive fixed-width date windows ending on a given day.

    Args:
        today: Last calendar day covered by the plan.
        count: Number of buckets.
        width_days: Days per bucket.
        label: Builds a bucket label from its first day.
    """

    def __init__(
        self,
        today: date,
        count: int,
        width_days: int,
        label: Callable[[date], str],
    ) -> None:
        self.first_day = today - timedelta(days=count * width_days - 1)
        self.width_days = width_days
        windows = []
        for i in range(count):
            start = self.first_day + timedelta(days=i * width_days)
            windows.append(BucketWindow(label(start), start, start + timedelta(days=width_days)))
        super().__init__(windows)

    def locate(self, moment: datetime) -> int | None:
        offset = (moment.date() - self.first_day).days
        if offset < 0 or offset >= len(self.windows) * self.width_days:
            return None
        return offset // self.width_days


def plan_for(time_range: TimeRange, today: date) -> BucketPlan:
    """Bucket plan of a range ending on today."""
    if time_range == TimeRange.LAST_24_HOURS:
        return HourOfDayPlan()
    if time_range == TimeRange.LAST_7_DAYS:
        return DateWindowPlan(today, count=7, width_days=1, label=weekday_label)
    if time_range == TimeRange.LAST_30_DAYS:
        return DateWindowPlan(today, count=4, width_days=7, label=day_label)
    return DateWindowPlan(today, count=3, width_days=30, label=day_label)
