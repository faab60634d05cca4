# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course progress aggregation.

This package turns lesson progress records into:
- Relation index: published lesson ids per course, orphans partitioned out
- Personal progress: one learner's completion per course
- Cohort popularity: enrollment/completion counts per course
- Activity series: one learner's completions over days, months and subjects

Every function is pure and synchronous over an in-memory snapshot.

Usage:
    from coursepulse.domains.progress import (
        build_relation_index,
        calculate_personal_progress,
        rank_popular_courses,
    )

    index = build_relation_index(courses, modules, lessons)
    mine = calculate_personal_progress(index, user_id, my_records)
    ranking = rank_popular_courses(index, all_records, limit=6)
"""

from coursepulse.domains.progress.activity import (
    ActivityPoint,
    ActivitySeries,
    SubjectShare,
    build_activity_series,
)
from coursepulse.domains.progress.cohort import (
    CoursePopularity,
    PopularitySummary,
    rank_popular_courses,
    summarize_popularity,
)
from coursepulse.domains.progress.index import (
    ExcludedLesson,
    ExclusionReason,
    LessonResolution,
    RelationIndex,
    build_relation_index,
    resolve_lesson,
)
from coursepulse.domains.progress.models import (
    Course,
    Lesson,
    Module,
    ProgressRecord,
    ProgressStatus,
    SessionRecord,
)
from coursepulse.domains.progress.personal import (
    CourseProgress,
    calculate_personal_progress,
    progress_for,
    round_percent,
)
from coursepulse.domains.progress.snapshot import FetchResult, LearningSnapshot, unwrap

__all__ = [
    # Models
    "Course",
    "Module",
    "Lesson",
    "ProgressRecord",
    "ProgressStatus",
    "SessionRecord",
    # Snapshot
    "FetchResult",
    "LearningSnapshot",
    "unwrap",
    # Relation index
    "RelationIndex",
    "LessonResolution",
    "ExcludedLesson",
    "ExclusionReason",
    "build_relation_index",
    "resolve_lesson",
    # Personal progress
    "CourseProgress",
    "calculate_personal_progress",
    "progress_for",
    "round_percent",
    # Cohort popularity
    "CoursePopularity",
    "PopularitySummary",
    "rank_popular_courses",
    "summarize_popularity",
    # Activity series
    "ActivityPoint",
    "ActivitySeries",
    "SubjectShare",
    "build_activity_series",
]
