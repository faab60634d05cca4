# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

Snapshot fixtures describe a small catalog:
- c1 "Python Basics" (published, category "Programming"): m1 -> l1, l2
- c2 "Data Science" (published, category "Data"): m2 -> l3
- c3 "Draft Course" (unpublished): m3 -> l4
- orphans: m-orphan points at a missing course (holding l-lost),
  l-orphan points at a missing module
- l-draft: unpublished lesson in m1

Record builders live in tests/helpers.py.
"""

from datetime import datetime, timezone

import pytest

from coursepulse.core.config import clear_settings_cache
from coursepulse.domains.progress import (
    Course,
    Lesson,
    Module,
)


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Snapshot Fixtures
# =============================================================================


@pytest.fixture
def courses() -> list[Course]:
    """Provide the sample courses."""
    return [
        Course(id="c1", title="Python Basics", is_published=True, category="Programming"),
        Course(id="c2", title="Data Science", is_published=True, category="Data"),
        Course(id="c3", title="Draft Course", is_published=False),
    ]


@pytest.fixture
def modules() -> list[Module]:
    """Provide the sample modules."""
    return [
        Module(id="m1", course_id="c1"),
        Module(id="m2", course_id="c2"),
        Module(id="m3", course_id="c3"),
        Module(id="m-orphan", course_id="c-missing"),
    ]


@pytest.fixture
def lessons() -> list[Lesson]:
    """Provide the sample lessons."""
    return [
        Lesson(id="l1", module_id="m1", is_published=True, duration_minutes=30),
        Lesson(id="l2", module_id="m1", is_published=True, duration_minutes=60),
        Lesson(id="l3", module_id="m2", is_published=True, duration_minutes=45),
        Lesson(id="l4", module_id="m3", is_published=True, duration_minutes=15),
        Lesson(id="l-draft", module_id="m1", is_published=False, duration_minutes=10),
        Lesson(id="l-orphan", module_id="m-missing", is_published=True),
        Lesson(id="l-lost", module_id="m-orphan", is_published=True),
    ]


@pytest.fixture
def now() -> datetime:
    """Provide a fixed current instant (Monday 2026-10-19 15:30 UTC)."""
    return datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
