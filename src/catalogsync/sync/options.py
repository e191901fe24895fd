"""Options of a sync run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from catalogsync.config import DEFAULT_BATCH_SIZE, DEFAULT_PARALLELISM, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from catalogsync.config import SyncConfig
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.errors import SyncError

type ErrorCallback = Callable[[str, SyncError], None]
type WarningCallback = Callable[[str], None]
type BeforeCreateCallback[TDraft] = Callable[[TDraft], TDraft | None]
type BeforeUpdateCallback[TDraft, TResource] = Callable[
    [Sequence[UpdateAction], TDraft, TResource], Sequence[UpdateAction]
]


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncOptions[TDraft, TResource]:
    """Tuning, removal policy and hooks of one sync run.

    ``before_create_callback`` may return a modified draft or ``None`` to skip
    the creation; ``before_update_callback`` may return a modified action list,
    an empty list skips the update. Both count as skipped, not failed.
    """

    batch_size: int = DEFAULT_BATCH_SIZE
    parallelism: int = DEFAULT_PARALLELISM
    ensure_channels: bool = False
    remove_other_locales: bool = True
    remove_other_set_entries: bool = True
    remove_other_collection_entries: bool = True
    remove_other_properties: bool = True
    error_callback: ErrorCallback | None = None
    warning_callback: WarningCallback | None = None
    before_create_callback: BeforeCreateCallback[TDraft] | None = None
    before_update_callback: BeforeUpdateCallback[TDraft, TResource] | None = None

    def __post_init__(self) -> None:
        if self.batch_size <= 0:
            raise ConfigurationError(f"batch_size must be positive, got {self.batch_size}")
        if self.parallelism <= 0:
            raise ConfigurationError(f"parallelism must be positive, got {self.parallelism}")

    @classmethod
    def from_config(cls, config: SyncConfig, **overrides: Any) -> SyncOptions[TDraft, TResource]:
        options = cls(
            batch_size=config.batch_size,
            parallelism=config.parallelism,
            ensure_channels=config.ensure_channels,
        )
        return replace(options, **overrides) if overrides else options
