"""Categories."""

from __future__ import annotations

from dataclasses import dataclass

from .base import (
    Asset,
    AssetDraft,
    CustomFields,
    CustomFieldsDraft,
    LocalizedString,
    ReferenceKey,
    collect_reference_keys,
)
from .enums import ReferenceKind


@dataclass(slots=True, frozen=True, kw_only=True)
class CategoryDraft:
    key: str | None
    name: LocalizedString
    slug: LocalizedString
    description: LocalizedString | None = None
    parent: str | None = None
    order_hint: str | None = None
    external_id: str | None = None
    meta_title: LocalizedString | None = None
    meta_description: LocalizedString | None = None
    meta_keywords: LocalizedString | None = None
    assets: tuple[AssetDraft, ...] = ()
    custom: CustomFieldsDraft | None = None

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        own: list[ReferenceKey] = []
        if self.parent is not None:
            own.append(ReferenceKey(ReferenceKind.CATEGORY, self.parent))
        if self.custom is not None:
            own.extend(self.custom.reference_keys())
        return collect_reference_keys(own, *(asset.reference_keys() for asset in self.assets))


@dataclass(slots=True, frozen=True, kw_only=True)
class Category:
    id: str
    version: int
    key: str | None
    name: LocalizedString
    slug: LocalizedString
    description: LocalizedString | None = None
    parent_id: str | None = None
    order_hint: str | None = None
    external_id: str | None = None
    meta_title: LocalizedString | None = None
    meta_description: LocalizedString | None = None
    meta_keywords: LocalizedString | None = None
    assets: tuple[Asset, ...] = ()
    custom: CustomFields | None = None
