# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Course relation index.

Resolves Lesson -> Module -> Course chains into a per-course set of
published lesson ids. Every other progress aggregation reads lesson
membership from this index.

Lessons that cannot be attributed to a known course are not errors.
Each lesson is resolved to a LessonResolution, and the ones that carry an
exclusion reason are kept on the index for inspection instead of being
dropped silently.

Usage:
    from coursepulse.domains.progress.index import build_relation_index

    index = build_relation_index(courses, modules, lessons)
    index.lessons_for("course-1")   # frozenset of lesson ids
    index.excluded                  # ExcludedLesson records
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from coursepulse.domains.exceptions import DuplicateIdError
from coursepulse.domains.progress.models import Course, Lesson, Module

logger = logging.getLogger(__name__)


class ExclusionReason(str, Enum):
    """Why a lesson does not count toward any course."""

    UNKNOWN_MODULE = "unknown_module"
    UNKNOWN_COURSE = "unknown_course"
    UNPUBLISHED = "unpublished"


@dataclass(frozen=True)
class LessonResolution:
    """Outcome of resolving one lesson to its course.

    Exactly one of course_id and reason is set.
    """

    lesson_id: str
    course_id: str | None = None
    reason: ExclusionReason | None = None

    @property
    def is_included(self) -> bool:
        return self.reason is None


@dataclass(frozen=True)
class ExcludedLesson:
    """A lesson left out of every course total."""

    lesson_id: str
    module_id: str | None
    reason: ExclusionReason


@dataclass(frozen=True)
class RelationIndex:
    """Course id to published lesson ids, plus the excluded partition.

    Attributes:
        courses: Known courses by id.
        lessons: Every lesson of the snapshot by id.
        course_lessons: Published lesson ids per course. Every known course
            has an entry, empty when it has no eligible lessons.
        lesson_courses: Owning course id per included lesson.
        excluded: Lessons that count nowhere, with the reason.
        orphan_modules: Ids of modules whose course does not exist.
    """

    courses: dict[str, Course] = field(default_factory=dict)
    lessons: dict[str, Lesson] = field(default_factory=dict)
    course_lessons: dict[str, frozenset[str]] = field(default_factory=dict)
    lesson_courses: dict[str, str] = field(default_factory=dict)
    excluded: tuple[ExcludedLesson, ...] = ()
    orphan_modules: tuple[str, ...] = ()

    @property
    def included(self) -> frozenset[str]:
        """Ids of every lesson that counts toward some course."""
        return frozenset(self.lesson_courses)

    def lessons_for(self, course_id: str) -> frozenset[str]:
        """Published lesson ids of a course; empty for unknown courses."""
        return self.course_lessons.get(course_id, frozenset())

    def course_of(self, lesson_id: str) -> str | None:
        """Owning course of an included lesson."""
        return self.lesson_courses.get(lesson_id)


def _index_by_id(items: Iterable, entity: str) -> dict:
    by_id: dict = {}
    for item in items:
        if item.id in by_id:
            raise DuplicateIdError(entity, item.id)
        by_id[item.id] = item
    return by_id


def resolve_lesson(
    lesson: Lesson,
    module_courses: dict[str, str | None],
    courses: dict[str, Course],
) -> LessonResolution:
    """Resolve a lesson to its course or to the reason it is excluded.

    Args:
        lesson: Lesson to resolve.
        module_courses: Course id per module id, for every known module.
        courses: Known courses by id.

    Returns:
        LessonResolution carrying either the course id or the reason.
    """
    if lesson.module_id is None or lesson.module_id not in module_courses:
        return LessonResolution(lesson.id, reason=ExclusionReason.UNKNOWN_MODULE)

    course_id = module_courses[lesson.module_id]
    if course_id is None or course_id not in courses:
        return LessonResolution(lesson.id, reason=ExclusionReason.UNKNOWN_COURSE)

    if not lesson.is_published:
        return LessonResolution(lesson.id, reason=ExclusionReason.UNPUBLISHED)

    return LessonResolution(lesson.id, course_id=course_id)


def build_relation_index(
    courses: Iterable[Course],
    modules: Iterable[Module],
    lessons: Iterable[Lesson],
) -> RelationIndex:
    """Build the course relation index from a snapshot.

    Args:
        courses: All courses.
        modules: All modules.
        lessons: All lessons.

    Returns:
        RelationIndex for the snapshot.

    Raises:
        DuplicateIdError: If an id repeats within courses, modules or lessons.
    """
    courses_by_id: dict[str, Course] = _index_by_id(courses, "course")
    modules_by_id: dict[str, Module] = _index_by_id(modules, "module")
    lessons_by_id: dict[str, Lesson] = _index_by_id(lessons, "lesson")

    module_courses: dict[str, str | None] = {}
    orphan_modules: list[str] = []
    for module in modules_by_id.values():
        module_courses[module.id] = module.course_id
        if module.course_id not in courses_by_id:
            orphan_modules.append(module.id)

    members: dict[str, set[str]] = {course_id: set() for course_id in courses_by_id}
    lesson_courses: dict[str, str] = {}
    excluded: list[ExcludedLesson] = []

    for lesson in lessons_by_id.values():
        resolution = resolve_lesson(lesson, module_courses, courses_by_id)
        if resolution.is_included:
            members[resolution.course_id].add(lesson.id)
            lesson_courses[lesson.id] = resolution.course_id
        else:
            excluded.append(ExcludedLesson(lesson.id, lesson.module_id, resolution.reason))

    if orphan_modules or excluded:
        logger.debug(
            "Relation index excluded %d lessons and %d orphan modules",
            len(excluded),
            len(orphan_modules),
        )

    return RelationIndex(
        courses=courses_by_id,
        lessons=lessons_by_id,
        course_lessons={course_id: frozenset(ids) for course_id, ids in members.items()},
        lesson_courses=lesson_courses,
        excluded=tuple(excluded),
        orphan_modules=tuple(orphan_modules),
    )
