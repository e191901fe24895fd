"""Removal policy the diff builders consult."""

from __future__ import annotations

from typing import Protocol


class DiffOptions(Protocol):
    """Which parts of the existing state a draft is allowed to remove.

    Anything the draft omits is kept unless the matching flag is set:
    locales of localized fields, entries of set-valued fields (categories,
    asset tags), entries of collections (prices, images, assets) and plain
    properties (scalar fields, attributes, custom fields).
    """

    @property
    def remove_other_locales(self) -> bool: ...

    @property
    def remove_other_set_entries(self) -> bool: ...

    @property
    def remove_other_collection_entries(self) -> bool: ...

    @property
    def remove_other_properties(self) -> bool: ...
