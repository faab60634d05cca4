# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Cohort course popularity.

Enrollment and completion counts per published course across all users,
ranked for the admin "popular courses" chart.

Definitions:
- Enrollment: the user has at least one progress record, of any status,
  on a lesson of the course.
- Completion: the user has at least one completed record on a lesson of
  the course. This is not full-course completion.
"""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from coursepulse.domains.progress.index import RelationIndex
from coursepulse.domains.progress.models import ProgressRecord
from coursepulse.domains.progress.personal import round_percent


@dataclass(frozen=True)
class CoursePopularity:
    """Cohort counts for one course."""

    course_id: str
    title: str
    enrollment_count: int = 0
    completion_count: int = 0

    @property
    def completion_rate(self) -> int:
        """Completions as an integer percentage of enrollments."""
        return round_percent(self.completion_count, self.enrollment_count)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "course_id": self.course_id,
            "title": self.title,
            "enrollment_count": self.enrollment_count,
            "completion_count": self.completion_count,
            "completion_rate": self.completion_rate,
        }


@dataclass(frozen=True)
class PopularitySummary:
    """Totals shown under the popular courses chart."""

    total_enrollments: int = 0
    total_completions: int = 0

    @property
    def completion_rate(self) -> int:
        return round_percent(self.total_completions, self.total_enrollments)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "total_enrollments": self.total_enrollments,
            "total_completions": self.total_completions,
            "completion_rate": self.completion_rate,
        }


def rank_popular_courses(
    index: RelationIndex,
    records: Iterable[ProgressRecord],
    limit: int | None = None,
) -> list[CoursePopularity]:
    """Rank published courses by enrollment across all users.

    Args:
        index: Relation index of the snapshot.
        records: Progress records of every user.
        limit: Keep only the first N ranked courses. None keeps all.

    Returns:
        Courses sorted by enrollment descending, then course id ascending.
    """
    published = [course for course in index.courses.values() if course.is_published]
    if not published:
        return []

    enrolled: dict[str, set[str]] = defaultdict(set)
    completed: dict[str, set[str]] = defaultdict(set)
    for record in records:
        course_id = index.course_of(record.lesson_id)
        if course_id is None:
            continue
        enrolled[course_id].add(record.user_id)
        if record.is_completed:
            completed[course_id].add(record.user_id)

    ranked = []
    for course in published:
        enrollment = len(enrolled.get(course.id, ()))
        ranked.append(
            CoursePopularity(
                course_id=course.id,
                title=course.title,
                enrollment_count=enrollment,
                completion_count=min(len(completed.get(course.id, ())), enrollment),
            )
        )

    ranked.sort(key=lambda item: (-item.enrollment_count, item.course_id))
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def summarize_popularity(ranked: Iterable[CoursePopularity]) -> PopularitySummary:
    """Sum enrollments and completions over ranked courses."""
    ranked = list(ranked)
    return PopularitySummary(
        total_enrollments=sum(item.enrollment_count for item in ranked),
        total_completions=sum(item.completion_count for item in ranked),
    )
