# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Snapshot assembly from data-access results.

The data-access layer wraps every read in a ``{data, error}`` result.
This module turns those results into a LearningSnapshot the aggregation
engine can consume, keeping "no rows" (an empty list) apart from "the
read failed" (an exception the caller surfaces separately).

Usage:
    snapshot = LearningSnapshot.from_results(
        courses=FetchResult(data=course_rows),
        modules=FetchResult(data=module_rows),
        lessons=FetchResult(data=lesson_rows),
        progress=FetchResult(error="permission denied"),
    )  # raises SnapshotFetchError("progress", ...)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from coursepulse.domains.exceptions import SnapshotContractError, SnapshotFetchError
from coursepulse.domains.progress.models import (
    Course,
    Lesson,
    Module,
    ProgressRecord,
    SessionRecord,
)


@dataclass(frozen=True)
class FetchResult:
    """Uniform result of one data-access read.

    Attributes:
        data: Rows read, or None when the read failed.
        error: Error object or message when the read failed.
    """

    data: Sequence[Any] | None = field(default=None)
    error: Any = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None


def unwrap(result: FetchResult, collection: str) -> list[Any]:
    """Return the rows of a successful read.

    Args:
        result: Data-access result.
        collection: Collection name used in error messages.

    Returns:
        The rows, possibly empty.

    Raises:
        SnapshotFetchError: If the read reported an error.
        SnapshotContractError: If the read returned no data and no error.
    """
    if result.error is not None:
        raise SnapshotFetchError(collection, result.error)
    if result.data is None:
        raise SnapshotContractError(collection)
    return list(result.data)


class LearningSnapshot(BaseModel):
    """One internally consistent read of every collection the engine uses."""

    model_config = ConfigDict(frozen=True)

    courses: list[Course] = Field(default_factory=list)
    modules: list[Module] = Field(default_factory=list)
    lessons: list[Lesson] = Field(default_factory=list)
    progress: list[ProgressRecord] = Field(default_factory=list)
    sessions: list[SessionRecord] = Field(default_factory=list)

    @classmethod
    def from_results(
        cls,
        courses: FetchResult | None = None,
        modules: FetchResult | None = None,
        lessons: FetchResult | None = None,
        progress: FetchResult | None = None,
        sessions: FetchResult | None = None,
    ) -> "LearningSnapshot":
        """Build a snapshot from data-access results.

        Collections that were not requested (None) are empty. Rows may be
        dicts or already-built models.

        Raises:
            SnapshotFetchError: If any read reported an error.
            SnapshotContractError: If any read returned no data and no error.
            pydantic.ValidationError: If a row does not match its model.
        """
        requested = {
            "courses": courses,
            "modules": modules,
            "lessons": lessons,
            "progress": progress,
            "sessions": sessions,
        }
        rows = {
            name: unwrap(result, name)
            for name, result in requested.items()
            if result is not None
        }
        return cls.model_validate(rows)

    def progress_for_user(self, user_id: str) -> list[ProgressRecord]:
        """Progress records of a single user."""
        return [record for record in self.progress if record.user_id == user_id]
