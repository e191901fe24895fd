from __future__ import annotations

from typing import Any

import pytest

from catalogsync.config import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_PARALLELISM,
    ConfigurationError,
    SyncConfig,
)
from catalogsync.sync import SyncOptions


def test_defaults_remove_everything_the_draft_omits() -> None:
    options: SyncOptions[Any, Any] = SyncOptions()

    assert options.batch_size == DEFAULT_BATCH_SIZE
    assert options.parallelism == DEFAULT_PARALLELISM
    assert options.ensure_channels is False
    assert options.remove_other_locales
    assert options.remove_other_set_entries
    assert options.remove_other_collection_entries
    assert options.remove_other_properties
    assert options.error_callback is None


@pytest.mark.parametrize("field", ["batch_size", "parallelism"])
@pytest.mark.parametrize("value", [0, -3])
def test_non_positive_sizes_are_rejected(field: str, value: int) -> None:
    with pytest.raises(ConfigurationError, match=field):
        SyncOptions(**{field: value})


def test_from_config_applies_overrides() -> None:
    config = SyncConfig(batch_size=5, parallelism=2, ensure_channels=True)

    options: SyncOptions[Any, Any] = SyncOptions.from_config(
        config, parallelism=7, remove_other_locales=False
    )

    assert (options.batch_size, options.parallelism, options.ensure_channels) == (5, 7, True)
    assert options.remove_other_locales is False
    assert options.remove_other_properties is True


def test_from_config_validates_overrides() -> None:
    with pytest.raises(ConfigurationError):
        SyncOptions.from_config(SyncConfig(), batch_size=0)
