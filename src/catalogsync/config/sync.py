"""Synchronization defaults for sync runs."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_bool_env, optional_int_env
from .errors import ConfigurationError

DEFAULT_BATCH_SIZE = 30
DEFAULT_PARALLELISM = 10


@dataclass(frozen=True, slots=True)
class SyncConfig:
    batch_size: int = DEFAULT_BATCH_SIZE
    parallelism: int = DEFAULT_PARALLELISM
    ensure_channels: bool = False

    def __post_init__(self) -> None:
        if self.batch_size <= 0:
            raise ConfigurationError(f"batch_size must be positive, got {self.batch_size}")
        if self.parallelism <= 0:
            raise ConfigurationError(f"parallelism must be positive, got {self.parallelism}")


def get_sync_config() -> SyncConfig:
    """Build sync defaults, letting ``CATALOG_SYNC_*`` variables override them."""

    batch_size = optional_int_env("CATALOG_SYNC_BATCH_SIZE")
    parallelism = optional_int_env("CATALOG_SYNC_PARALLELISM")
    ensure_channels = optional_bool_env("CATALOG_SYNC_ENSURE_CHANNELS")
    return SyncConfig(
        batch_size=DEFAULT_BATCH_SIZE if batch_size is None else batch_size,
        parallelism=DEFAULT_PARALLELISM if parallelism is None else parallelism,
        ensure_channels=bool(ensure_channels),
    )
