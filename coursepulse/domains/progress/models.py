# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Snapshot entity models.

Read-only views of backend rows consumed by the aggregation engine.
Models are frozen and ignore unknown columns so raw rows can be passed
straight to ``model_validate``.
"""

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ProgressStatus(str, Enum):
    """Lesson progress status for a user."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class SnapshotModel(BaseModel):
    """Base for snapshot rows."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Course(SnapshotModel):
    """Course row."""

    id: str
    title: str
    is_published: bool = False
    category: str | None = None


class Module(SnapshotModel):
    """Module row. Belongs to exactly one course."""

    id: str
    course_id: str | None = None


class Lesson(SnapshotModel):
    """Lesson row. Belongs to exactly one module.

    ``duration`` is accepted as an alias for ``duration_minutes``; missing
    durations count as zero minutes.
    """

    id: str
    module_id: str | None = None
    is_published: bool = False
    duration_minutes: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("duration_minutes", "duration"),
    )

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def default_missing_duration(cls, value: object) -> object:
        """Treat a null duration as zero."""
        return 0 if value is None else value


class ProgressRecord(SnapshotModel):
    """Point-in-time progress of one user on one lesson."""

    user_id: str
    lesson_id: str
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == ProgressStatus.COMPLETED


class SessionRecord(SnapshotModel):
    """One learning session."""

    user_id: str
    started_at: datetime
    duration_minutes: int = Field(default=0, ge=0)

    @field_validator("duration_minutes", mode="before")
    @classmethod
    def default_missing_duration(cls, value: object) -> object:
        """Treat a null duration as zero."""
        return 0 if value is None else value
