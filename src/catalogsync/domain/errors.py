"""Failure taxonomy of a sync run.

Every failure is scoped to one draft: the orchestrator catches these at the
per-resource boundary, counts them and hands them to the error callback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class SyncError(Exception):
    """Base class for per-resource sync failures."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class DiffError(SyncError):
    """Raised by diff builders when an action cannot be computed."""


class ResolutionError(DiffError):
    """A reference key could not be mapped to a platform identifier."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        references: Sequence[object] = (),
    ) -> None:
        super().__init__(message, key=key)
        self.references = tuple(references)


class ValidationError(SyncError):
    """A draft fails structural preconditions (missing or duplicate keys)."""


class ConflictError(SyncError):
    """The existing resource changed between fetch and update."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        expected_version: int | None = None,
        current_version: int | None = None,
    ) -> None:
        super().__init__(message, key=key)
        self.expected_version = expected_version
        self.current_version = current_version


class TransportError(SyncError):
    """An external fetch/create/update call failed."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, key=key)
        self.status_code = status_code
