# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for cohort course popularity."""

import pytest

from helpers import completed, random_catalog, started

from coursepulse.domains.progress import (
    Course,
    Lesson,
    Module,
    build_relation_index,
    rank_popular_courses,
    summarize_popularity,
)


@pytest.fixture
def index(courses, modules, lessons):
    """Relation index of the sample catalog."""
    return build_relation_index(courses, modules, lessons)


def single_course_index(course_id: str = "A", lesson_ids=("101", "102")):
    """Index with one published course holding the given lessons."""
    return build_relation_index(
        [Course(id=course_id, title=f"Course {course_id}", is_published=True)],
        [Module(id="m", course_id=course_id)],
        [Lesson(id=lesson_id, module_id="m", is_published=True) for lesson_id in lesson_ids],
    )


class TestRankPopularCourses:
    """Tests for rank_popular_courses."""

    def test_enrollment_and_completion(self) -> None:
        """Test a started user enrolls and a completing user also completes."""
        records = [completed("u1", "101"), completed("u1", "102"), started("u2", "101")]

        ranked = rank_popular_courses(single_course_index(), records)

        assert len(ranked) == 1
        assert ranked[0].enrollment_count == 2
        assert ranked[0].completion_count == 1

    def test_partial_completion_counts_as_completion(self) -> None:
        """Test one completed lesson is enough for a completion."""
        ranked = rank_popular_courses(single_course_index(), [completed("u1", "101")])

        assert ranked[0].completion_count == 1

    def test_course_without_enrollment_is_kept(self) -> None:
        """Test a course with lessons but no records stays in the ranking."""
        ranked = rank_popular_courses(single_course_index(), [])

        assert [(c.course_id, c.enrollment_count, c.completion_count) for c in ranked] == [
            ("A", 0, 0)
        ]

    def test_course_without_lessons_is_kept(self) -> None:
        """Test a published course with no lessons ranks with zero counts."""
        index = build_relation_index([Course(id="E", title="Empty", is_published=True)], [], [])

        ranked = rank_popular_courses(index, [completed("u1", "x")])

        assert ranked[0].enrollment_count == 0

    def test_unpublished_courses_are_excluded(self, index) -> None:
        """Test unpublished courses never appear."""
        ranked = rank_popular_courses(index, [completed("u1", "l4")])

        assert "c3" not in {c.course_id for c in ranked}

    def test_ranking_order_and_tie_break(self) -> None:
        """Test descending enrollment with ascending id on ties."""
        index = build_relation_index(
            [
                Course(id="b", title="B", is_published=True),
                Course(id="a", title="A", is_published=True),
                Course(id="c", title="C", is_published=True),
            ],
            [Module(id="mb", course_id="b"), Module(id="ma", course_id="a"), Module(id="mc", course_id="c")],
            [
                Lesson(id="lb", module_id="mb", is_published=True),
                Lesson(id="la", module_id="ma", is_published=True),
                Lesson(id="lc", module_id="mc", is_published=True),
            ],
        )
        records = [started("u1", "lc"), started("u2", "lc"), started("u1", "lb"), started("u1", "la")]

        ranked = rank_popular_courses(index, records)

        assert [c.course_id for c in ranked] == ["c", "a", "b"]

    def test_users_counted_once_per_course(self, index) -> None:
        """Test several records of one user enroll them once."""
        records = [started("u1", "l1"), completed("u1", "l2"), completed("u1", "l1")]

        ranked = rank_popular_courses(index, records)

        c1 = next(c for c in ranked if c.course_id == "c1")
        assert (c1.enrollment_count, c1.completion_count) == (1, 1)

    def test_orphan_and_unpublished_lesson_records_are_ignored(self, index) -> None:
        """Test records on excluded lessons enroll nobody."""
        records = [completed("u1", "l-orphan"), completed("u2", "l-lost"), completed("u3", "l-draft")]

        ranked = rank_popular_courses(index, records)

        assert all(c.enrollment_count == 0 for c in ranked)

    def test_completion_never_exceeds_enrollment(self, index) -> None:
        """Test the cohort invariant on mixed input."""
        records = [
            completed("u1", "l1"),
            started("u2", "l1"),
            completed("u2", "l3"),
            completed("u3", "l2"),
            started("u3", "l-draft"),
        ]

        ranked = rank_popular_courses(index, records)

        assert all(c.completion_count <= c.enrollment_count for c in ranked)

    @pytest.mark.parametrize("seed", range(20))
    def test_completion_never_exceeds_enrollment_random(self, seed) -> None:
        """Test the cohort invariant on random inconsistent catalogs."""
        courses, modules, lessons, records = random_catalog(seed)
        index = build_relation_index(courses, modules, lessons)

        ranked = rank_popular_courses(index, records)

        assert len(ranked) == sum(1 for course in courses if course.is_published)
        for course in ranked:
            assert 0 <= course.completion_count <= course.enrollment_count
            assert 0 <= course.completion_rate <= 100

    def test_limit(self, index) -> None:
        """Test the ranking is cut after sorting."""
        ranked = rank_popular_courses(index, [started("u1", "l3")], limit=1)

        assert [c.course_id for c in ranked] == ["c2"]

    def test_empty_inputs(self) -> None:
        """Test no courses means an empty ranking."""
        index = build_relation_index([], [], [])

        assert rank_popular_courses(index, []) == []

    def test_idempotent(self, index) -> None:
        """Test repeated runs over the same input give identical output."""
        records = [started("u1", "l1"), completed("u2", "l3")]

        assert rank_popular_courses(index, records) == rank_popular_courses(index, records)

    def test_completion_rate(self) -> None:
        """Test the per-course completion rate."""
        records = [completed("u1", "101"), started("u2", "101"), started("u3", "102")]

        ranked = rank_popular_courses(single_course_index(), records)

        assert ranked[0].completion_rate == 33
        assert ranked[0].to_dict()["completion_rate"] == 33


class TestSummarizePopularity:
    """Tests for summarize_popularity."""

    def test_totals(self, index) -> None:
        """Test totals sum over the ranked courses."""
        records = [completed("u1", "l1"), started("u2", "l1"), completed("u2", "l3")]

        summary = summarize_popularity(rank_popular_courses(index, records))

        assert summary.total_enrollments == 3
        assert summary.total_completions == 2
        assert summary.completion_rate == 67

    def test_empty(self) -> None:
        """Test totals of an empty ranking."""
        summary = summarize_popularity([])

        assert summary.to_dict() == {
            "total_enrollments": 0,
            "total_completions": 0,
            "completion_rate": 0,
        }
