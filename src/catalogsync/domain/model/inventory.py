"""Inventory entries.

An entry has no key of its own; it is identified by its SKU together with
its supply channel. Both sides of a sync derive the same composite key from
them, ``sku`` alone or ``sku@channel``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import CustomFields, CustomFieldsDraft, ReferenceKey
from .enums import ReferenceKind

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

CHANNEL_SEPARATOR = "@"


def inventory_key(sku: str, supply_channel: str | None) -> str:
    if supply_channel is None:
        return sku
    return f"{sku}{CHANNEL_SEPARATOR}{supply_channel}"


def skus_of(keys: Iterable[str]) -> set[str]:
    """SKUs to look up for the given composite keys.

    Channel keys never contain the separator but SKUs may, so a key holding
    it yields both the whole key and the part before the last separator.
    """

    skus: set[str] = set()
    for key in keys:
        skus.add(key)
        sku, separator, _ = key.rpartition(CHANNEL_SEPARATOR)
        if separator and sku:
            skus.add(sku)
    return skus


@dataclass(slots=True, frozen=True, kw_only=True)
class InventoryEntryDraft:
    sku: str
    quantity_on_stock: int
    supply_channel: str | None = None
    restockable_in_days: int | None = None
    expected_delivery: datetime | None = None
    custom: CustomFieldsDraft | None = None

    @property
    def key(self) -> str:
        return inventory_key(self.sku, self.supply_channel)

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        keys: list[ReferenceKey] = []
        if self.supply_channel is not None:
            keys.append(ReferenceKey(ReferenceKind.CHANNEL, self.supply_channel))
        if self.custom is not None:
            keys.extend(self.custom.reference_keys())
        return tuple(keys)


@dataclass(slots=True, frozen=True, kw_only=True)
class InventoryEntry:
    """An entry as stored; ``supply_channel_key`` is read from the expanded channel."""

    id: str
    version: int
    sku: str
    quantity_on_stock: int
    available_quantity: int | None = None
    supply_channel_id: str | None = None
    supply_channel_key: str | None = None
    restockable_in_days: int | None = None
    expected_delivery: datetime | None = None
    custom: CustomFields | None = None

    @property
    def key(self) -> str:
        return inventory_key(self.sku, self.supply_channel_key)
