# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Record builders shared by the unit tests."""

import random
from datetime import datetime

from coursepulse.domains.progress import (
    Course,
    Lesson,
    Module,
    ProgressRecord,
    ProgressStatus,
    SessionRecord,
)


def completed(user_id: str, lesson_id: str, at: datetime | None = None) -> ProgressRecord:
    """Build a completed progress record."""
    return ProgressRecord(
        user_id=user_id,
        lesson_id=lesson_id,
        status=ProgressStatus.COMPLETED,
        completed_at=at,
    )


def started(user_id: str, lesson_id: str) -> ProgressRecord:
    """Build an in-progress record."""
    return ProgressRecord(user_id=user_id, lesson_id=lesson_id, status=ProgressStatus.IN_PROGRESS)


def session(user_id: str, started_at: datetime, duration_minutes: int = 0) -> SessionRecord:
    """Build a session record."""
    return SessionRecord(user_id=user_id, started_at=started_at, duration_minutes=duration_minutes)


def random_catalog(
    seed: int,
    users: int = 5,
) -> tuple[list[Course], list[Module], list[Lesson], list[ProgressRecord]]:
    """Build a seeded random catalog with messy progress rows.

    The catalog mixes unpublished courses and lessons, modules of missing
    courses, lessons of missing modules, repeated records and records on
    lessons that do not exist.
    """
    rng = random.Random(seed)

    courses = [
        Course(id=f"c{i}", title=f"Course {i}", is_published=rng.random() < 0.8)
        for i in range(rng.randint(0, 6))
    ]
    course_ids = [course.id for course in courses] + ["c-missing"]
    modules = [
        Module(id=f"m{i}", course_id=rng.choice(course_ids))
        for i in range(rng.randint(0, 10))
    ]
    module_ids = [module.id for module in modules] + ["m-missing"]
    lessons = [
        Lesson(id=f"l{i}", module_id=rng.choice(module_ids), is_published=rng.random() < 0.85)
        for i in range(rng.randint(0, 25))
    ]
    lesson_ids = [lesson.id for lesson in lessons] + ["l-missing"]

    records = [
        ProgressRecord(
            user_id=f"u{rng.randrange(users)}",
            lesson_id=rng.choice(lesson_ids),
            status=rng.choice(list(ProgressStatus)),
        )
        for _ in range(rng.randint(0, 80))
    ]
    return courses, modules, lessons, records
