# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Session engagement aggregation.

Time-bucketed active-user and session counts for engagement charts.
Independent from lesson progress; operates on session records only.
"""

from coursepulse.domains.engagement.aggregator import (
    EngagementBucket,
    EngagementSeries,
    aggregate_sessions,
)
from coursepulse.domains.engagement.buckets import (
    BucketPlan,
    BucketWindow,
    DateWindowPlan,
    HourOfDayPlan,
    TimeRange,
    plan_for,
)

__all__ = [
    "TimeRange",
    "BucketPlan",
    "BucketWindow",
    "HourOfDayPlan",
    "DateWindowPlan",
    "plan_for",
    "EngagementBucket",
    "EngagementSeries",
    "aggregate_sessions",
]
