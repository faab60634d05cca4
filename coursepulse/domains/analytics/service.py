# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics service module.

This module provides the dashboard-facing service that runs the
aggregation engine over a LearningSnapshot:
- Personal progress per course for the learner dashboard
- Popular courses ranking and totals for the admin dashboard
- Engagement series for the admin activity chart
- Activity series for the learner progress chart

The service is stateless. The relation index is rebuilt from the
snapshot on every call, so concurrent dashboards can share one instance.

Usage:
    from coursepulse.domains.analytics import AnalyticsService

    service = AnalyticsService()
    progress = service.get_personal_progress(snapshot, user_id="u1")
    report = service.get_popular_courses(snapshot)
    series = service.get_engagement(snapshot, "7d")
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from coursepulse.core.config import Settings, get_settings
from coursepulse.domains.engagement import EngagementSeries, aggregate_sessions
from coursepulse.domains.progress import (
    ActivitySeries,
    CoursePopularity,
    CourseProgress,
    LearningSnapshot,
    PopularitySummary,
    RelationIndex,
    build_activity_series,
    build_relation_index,
    calculate_personal_progress,
    rank_popular_courses,
    summarize_popularity,
)
from coursepulse.utils.datetime import to_zone, utc_now
from coursepulse.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PopularCoursesReport:
    """Ranked popular courses with totals."""

    courses: list[CoursePopularity] = field(default_factory=list)
    summary: PopularitySummary = field(default_factory=PopularitySummary)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "courses": [course.to_dict() for course in self.courses],
            "summary": self.summary.to_dict(),
        }


class AnalyticsService:
    """Dashboard aggregation service.

    Attributes:
        settings: Application settings.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the analytics service.

        Args:
            settings: Application settings. Defaults to get_settings().
        """
        self.settings = settings or get_settings()

    def build_index(self, snapshot: LearningSnapshot) -> RelationIndex:
        """Build the relation index of a snapshot."""
        index = build_relation_index(snapshot.courses, snapshot.modules, snapshot.lessons)
        if index.excluded or index.orphan_modules:
            logger.info(
                "Snapshot contains unattributed content",
                excluded_lessons=len(index.excluded),
                orphan_modules=len(index.orphan_modules),
            )
        return index

    def get_personal_progress(
        self,
        snapshot: LearningSnapshot,
        user_id: str,
    ) -> dict[str, CourseProgress]:
        """Get a learner's progress for every course.

        Args:
            snapshot: Data snapshot; progress may contain every user's rows.
            user_id: The learner.

        Returns:
            CourseProgress per course id.
        """
        index = self.build_index(snapshot)
        progress = calculate_personal_progress(
            index, user_id, snapshot.progress_for_user(user_id)
        )
        logger.info(
            "Personal progress calculated",
            user_id=user_id,
            course_count=len(progress),
            completed_courses=sum(1 for p in progress.values() if p.is_complete),
        )
        return progress

    def get_popular_courses(
        self,
        snapshot: LearningSnapshot,
        limit: int | None = None,
    ) -> PopularCoursesReport:
        """Get the popular courses ranking.

        Args:
            snapshot: Data snapshot with every user's progress.
            limit: Number of courses to keep. Defaults to the configured limit.

        Returns:
            PopularCoursesReport with the ranked courses and their totals.
        """
        if limit is None:
            limit = self.settings.analytics.popular_courses_limit
        index = self.build_index(snapshot)
        ranked = rank_popular_courses(index, snapshot.progress, limit=limit)
        summary = summarize_popularity(ranked)
        logger.info(
            "Popular courses ranked",
            course_count=len(ranked),
            total_enrollments=summary.total_enrollments,
            total_completions=summary.total_completions,
        )
        return PopularCoursesReport(courses=ranked, summary=summary)

    def get_engagement(
        self,
        snapshot: LearningSnapshot,
        time_range: str,
        now: datetime | None = None,
    ) -> EngagementSeries:
        """Get the engagement series of a range.

        Args:
            snapshot: Data snapshot with session records.
            time_range: Range token ("24h", "7d", "30d", "90d").
            now: Current instant. Defaults to utc_now().

        Returns:
            EngagementSeries bucketed in the configured timezone.

        Raises:
            InvalidTimeRangeError: If time_range is not supported.
        """
        series = aggregate_sessions(
            time_range,
            now or utc_now(),
            snapshot.sessions,
            tz=self.settings.analytics.zone,
        )
        logger.info(
            "Engagement aggregated",
            time_range=series.time_range.value,
            bucket_count=len(series.buckets),
            total_sessions=series.total_session_count,
            peak_active_users=series.peak_active_users,
        )
        return series

    def get_activity_series(
        self,
        snapshot: LearningSnapshot,
        user_id: str,
        now: datetime | None = None,
    ) -> ActivitySeries:
        """Get a learner's activity series.

        Args:
            snapshot: Data snapshot; progress may contain every user's rows.
            user_id: The learner.
            now: Current instant. Defaults to utc_now().

        Returns:
            ActivitySeries ending on today's date in the configured timezone.
        """
        zone = self.settings.analytics.zone
        index = self.build_index(snapshot)
        series = build_activity_series(
            index,
            user_id,
            snapshot.progress_for_user(user_id),
            today=to_zone(now or utc_now(), zone).date(),
            months=self.settings.analytics.activity_months,
            tz=zone,
        )
        logger.info(
            "Activity series built",
            user_id=user_id,
            empty=series.is_empty,
        )
        return series
