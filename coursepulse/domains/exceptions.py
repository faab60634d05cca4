# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for the aggregation engine.

This module defines the exception hierarchy shared by the domains:
- AggregationError: Base exception for all engine errors
- DuplicateIdError: An entity id appears more than once in a snapshot
- MixedUserRecordsError: A personal view received another user's records
- InvalidTimeRangeError: Unknown engagement chart range token
- SnapshotError: Base for data-access contract violations
- SnapshotFetchError: The data-access layer reported a failed read
- SnapshotContractError: The data-access layer returned no collection

Orphaned lessons and modules are not errors; they are excluded from
totals and recorded on the relation index.
"""


class AggregationError(Exception):
    """Base exception for all aggregation engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict | None = None):
        """Initialize aggregation error.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class DuplicateIdError(AggregationError):
    """Raised when an entity id is not unique within its collection.

    Attributes:
        entity: Entity type name ("course", "module", "lesson").
        entity_id: The repeated id.
    """

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"Duplicate {entity} id: {entity_id}",
            {"entity": entity, "id": entity_id},
        )


class MixedUserRecordsError(AggregationError):
    """Raised when a personal view receives records of other users."""

    def __init__(self, user_id: str, foreign_user_ids: list[str]):
        self.user_id = user_id
        self.foreign_user_ids = foreign_user_ids
        super().__init__(
            f"Progress records for user {user_id} contain other users",
            {"foreign_user_ids": foreign_user_ids},
        )


class InvalidTimeRangeError(AggregationError):
    """Raised for an unsupported engagement range token."""

    def __init__(self, token: str, allowed: list[str]):
        self.token = token
        super().__init__(
            f"Unsupported time range: {token!r}",
            {"allowed": allowed},
        )


class SnapshotError(AggregationError):
    """Base exception for data-access contract violations."""

    def __init__(self, message: str, collection: str, details: dict | None = None):
        self.collection = collection
        super().__init__(message, {"collection": collection, **(details or {})})


class SnapshotFetchError(SnapshotError):
    """The data-access layer reported a failure for a collection.

    Attributes:
        error: The error object or message returned by the data-access layer.
    """

    def __init__(self, collection: str, error: object):
        self.error = error
        super().__init__(
            f"Failed to fetch {collection}: {error}",
            collection,
        )


class SnapshotContractError(SnapshotError):
    """The data-access layer returned neither data nor an error."""

    def __init__(self, collection: str):
        super().__init__(
            f"No data returned for {collection}; expected a list",
            collection,
        )
