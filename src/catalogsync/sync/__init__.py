"""Batch orchestration, options and statistics of sync runs."""

from __future__ import annotations

from .engine import BatchStage, Sync
from .options import (
    BeforeCreateCallback,
    BeforeUpdateCallback,
    ErrorCallback,
    SyncOptions,
    WarningCallback,
)
from .statistics import SyncStatistics
from .syncers import (
    CartDiscountSyncer,
    CategorySyncer,
    InventorySyncer,
    ProductSyncer,
    ResourceSyncer,
)

__all__ = [
    "BatchStage",
    "BeforeCreateCallback",
    "BeforeUpdateCallback",
    "CartDiscountSyncer",
    "CategorySyncer",
    "ErrorCallback",
    "InventorySyncer",
    "ProductSyncer",
    "ResourceSyncer",
    "Sync",
    "SyncOptions",
    "SyncStatistics",
    "WarningCallback",
]
