# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session engagement aggregation.

Buckets session records by a range's bucket plan and counts distinct
active users and sessions per bucket for the admin engagement chart.

Summary statistics:
- peak_active_users: largest active_user_count of any bucket
- average_session_count: total sessions divided by the number of
  buckets, zero-activity buckets included

An empty session list yields an empty bucket list so the chart can show
its "no data" state instead of a flat line.

Usage:
    from coursepulse.domains.engagement import aggregate_sessions

    series = aggregate_sessions("7d", now=utc_now(), sessions=sessions)
    series.buckets[-1].label   # today's weekday
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Any

from coursepulse.domains.engagement.buckets import TimeRange, plan_for
from coursepulse.domains.progress.models import SessionRecord
from coursepulse.utils.datetime import to_zone, zone_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngagementBucket:
    """Activity within one bucket."""

    label: str
    active_user_count: int = 0
    session_count: int = 0
    total_minutes: int = 0
    start: date | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "active_user_count": self.active_user_count,
            "session_count": self.session_count,
            "total_minutes": self.total_minutes,
            "start": self.start.isoformat() if self.start else None,
        }


@dataclass(frozen=True)
class EngagementSeries:
    """Bucketed engagement plus summary statistics."""

    time_range: TimeRange
    buckets: list[EngagementBucket] = field(default_factory=list)
    peak_active_users: int = 0
    average_session_count: float = 0.0
    total_session_count: int = 0
    total_minutes: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.buckets

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "time_range": self.time_range.value,
            "buckets": [bucket.to_dict() for bucket in self.buckets],
            "peak_active_users": self.peak_active_users,
            "average_session_count": self.average_session_count,
            "total_session_count": self.total_session_count,
            "total_minutes": self.total_minutes,
        }


def aggregate_sessions(
    time_range: "str | TimeRange",
    now: datetime,
    sessions: Iterable[SessionRecord],
    tz: tzinfo | None = None,
) -> EngagementSeries:
    """Bucket sessions for a range ending now.

    Args:
        time_range: Range token ("24h", "7d", "30d", "90d").
        now: Current instant; its calendar day is the last day of the range.
        sessions: Session records to bucket.
        tz: Timezone for hours and calendar days. Defaults to now's timezone,
            or UTC when now is naive.

    Returns:
        EngagementSeries with buckets in chronological order.

    Raises:
        InvalidTimeRangeError: If time_range is not a supported token.
    """
    time_range = TimeRange.parse(time_range)
    sessions = list(sessions)
    if not sessions:
        return EngagementSeries(time_range=time_range)

    tz = tz or zone_of(now)
    plan = plan_for(time_range, to_zone(now, tz).date())

    users: list[set[str]] = [set() for _ in range(len(plan))]
    counts = [0] * len(plan)
    minutes = [0] * len(plan)
    dropped = 0
    for session in sessions:
        position = plan.locate(to_zone(session.started_at, tz))
        if position is None:
            dropped += 1
            continue
        users[position].add(session.user_id)
        counts[position] += 1
        minutes[position] += session.duration_minutes

    if dropped:
        logger.debug("Dropped %d sessions outside the %s window", dropped, time_range.value)

    buckets = [
        EngagementBucket(
            label=window.label,
            active_user_count=len(users[i]),
            session_count=counts[i],
            total_minutes=minutes[i],
            start=window.start,
        )
        for i, window in enumerate(plan.windows)
    ]
    total_sessions = sum(counts)
    return EngagementSeries(
        time_range=time_range,
        buckets=buckets,
        peak_active_users=max(bucket.active_user_count for bucket in buckets),
        average_session_count=total_sessions / len(buckets),
        total_session_count=total_sessions,
        total_minutes=sum(minutes),
    )
