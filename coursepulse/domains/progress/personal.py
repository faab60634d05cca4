# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Personal course progress.

Per-course completion ratios for a single learner, as shown on the
learner dashboard and course cards. The records passed in must already
be scoped to that learner; the cohort view lives in the cohort module.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from coursepulse.domains.exceptions import MixedUserRecordsError
from coursepulse.domains.progress.index import RelationIndex
from coursepulse.domains.progress.models import ProgressRecord, ProgressStatus
from coursepulse.utils.datetime import ensure_utc


def round_percent(part: int, whole: int) -> int:
    """Integer percentage of part in whole, rounding halves up.

    Returns 0 when whole is 0.

    Example:
        >>> round_percent(1, 8)
        13
    """
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


@dataclass(frozen=True)
class CourseProgress:
    """Completion of one course by one learner."""

    course_id: str
    completed_count: int = 0
    total_count: int = 0
    progress_percent: int = 0
    last_completed_at: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return self.total_count > 0 and self.completed_count == self.total_count

    @property
    def status(self) -> ProgressStatus:
        """Course-level status derived from the counts."""
        if self.completed_count <= 0:
            return ProgressStatus.NOT_STARTED
        if self.is_complete:
            return ProgressStatus.COMPLETED
        return ProgressStatus.IN_PROGRESS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for rendering."""
        return {
            "course_id": self.course_id,
            "completed_count": self.completed_count,
            "total_count": self.total_count,
            "progress_percent": self.progress_percent,
            "status": self.status.value,
            "is_complete": self.is_complete,
            "last_completed_at": (
                self.last_completed_at.isoformat() if self.last_completed_at else None
            ),
        }


def ensure_single_user(user_id: str, records: Iterable[ProgressRecord]) -> list[ProgressRecord]:
    """Materialize records and check that they all belong to user_id.

    Raises:
        MixedUserRecordsError: If any record belongs to another user.
    """
    records = list(records)
    foreign = sorted({r.user_id for r in records if r.user_id != user_id})
    if foreign:
        raise MixedUserRecordsError(user_id, foreign)
    return records


def calculate_personal_progress(
    index: RelationIndex,
    user_id: str,
    records: Iterable[ProgressRecord],
) -> dict[str, CourseProgress]:
    """Compute a learner's progress for every course in the index.

    Args:
        index: Relation index of the snapshot.
        user_id: The learner.
        records: The learner's progress records.

    Returns:
        CourseProgress per course id.

    Raises:
        MixedUserRecordsError: If records contain other users' rows.
    """
    records = ensure_single_user(user_id, records)

    completed_at: dict[str, datetime | None] = {}
    for record in records:
        if not record.is_completed:
            continue
        stamp = ensure_utc(record.completed_at)
        previous = completed_at.get(record.lesson_id)
        if previous is None or (stamp is not None and stamp > previous):
            completed_at[record.lesson_id] = stamp

    progress: dict[str, CourseProgress] = {}
    for course_id, lesson_ids in index.course_lessons.items():
        counted = lesson_ids.intersection(completed_at)
        total = len(lesson_ids)
        # a stale completion must never exceed the current total
        completed = min(len(counted), total)
        stamps = [completed_at[lesson_id] for lesson_id in counted if completed_at[lesson_id]]
        progress[course_id] = CourseProgress(
            course_id=course_id,
            completed_count=completed,
            total_count=total,
            progress_percent=round_percent(completed, total),
            last_completed_at=max(stamps) if stamps else None,
        )
    return progress


def progress_for(progress: dict[str, CourseProgress], course_id: str) -> CourseProgress:
    """Progress of one course, all zeros when the course is not indexed."""
    return progress.get(course_id) or CourseProgress(course_id=course_id)
