"""Products, their variants and variant prices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .base import (
    Asset,
    AssetDraft,
    CustomFields,
    CustomFieldsDraft,
    FieldMap,
    Image,
    LocalizedString,
    Money,
    ReferenceKey,
    collect_reference_keys,
)
from .enums import ReferenceKind

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(slots=True, frozen=True, kw_only=True)
class PriceDraft:
    """Desired price of a variant.

    ``customer_group`` and ``channel`` hold keys in drafts and resolved ids
    once the price is carried by an ``AddPrice``/``ChangePrice`` action.
    """

    value: Money
    country: str | None = None
    customer_group: str | None = None
    channel: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    custom: CustomFieldsDraft | None = None

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        keys: list[ReferenceKey] = []
        if self.customer_group is not None:
            keys.append(ReferenceKey(ReferenceKind.CUSTOMER_GROUP, self.customer_group))
        if self.channel is not None:
            keys.append(ReferenceKey(ReferenceKind.CHANNEL, self.channel))
        if self.custom is not None:
            keys.extend(self.custom.reference_keys())
        return tuple(keys)


type PriceScope = tuple[str, str | None, str | None, str | None, datetime | None, datetime | None]


@dataclass(slots=True, frozen=True, kw_only=True)
class Price:
    id: str
    value: Money
    country: str | None = None
    customer_group_id: str | None = None
    channel_id: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    custom: CustomFields | None = None

    @property
    def scope(self) -> PriceScope:
        return (
            self.value.currency,
            self.country,
            self.customer_group_id,
            self.channel_id,
            self.valid_from,
            self.valid_until,
        )


@dataclass(slots=True, frozen=True, kw_only=True)
class ProductVariantDraft:
    key: str | None
    sku: str | None = None
    attributes: FieldMap = field(default_factory=dict[str, object])
    prices: tuple[PriceDraft, ...] = ()
    images: tuple[Image, ...] = ()
    assets: tuple[AssetDraft, ...] = ()

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        return collect_reference_keys(
            *(price.reference_keys() for price in self.prices),
            *(asset.reference_keys() for asset in self.assets),
        )


@dataclass(slots=True, frozen=True, kw_only=True)
class ProductVariant:
    id: int
    key: str | None
    sku: str | None = None
    attributes: FieldMap = field(default_factory=dict[str, object])
    prices: tuple[Price, ...] = ()
    images: tuple[Image, ...] = ()
    assets: tuple[Asset, ...] = ()


@dataclass(slots=True, frozen=True, kw_only=True)
class ProductDraft:
    key: str | None
    product_type: str
    name: LocalizedString
    slug: LocalizedString
    master_variant: ProductVariantDraft
    variants: tuple[ProductVariantDraft, ...] = ()
    description: LocalizedString | None = None
    meta_title: LocalizedString | None = None
    meta_description: LocalizedString | None = None
    meta_keywords: LocalizedString | None = None
    categories: frozenset[str] = frozenset()
    tax_category: str | None = None

    @property
    def all_variants(self) -> tuple[ProductVariantDraft, ...]:
        return (self.master_variant, *self.variants)

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        own = [ReferenceKey(ReferenceKind.PRODUCT_TYPE, self.product_type)]
        own.extend(ReferenceKey(ReferenceKind.CATEGORY, key) for key in sorted(self.categories))
        if self.tax_category is not None:
            own.append(ReferenceKey(ReferenceKind.TAX_CATEGORY, self.tax_category))
        return collect_reference_keys(
            own, *(variant.reference_keys() for variant in self.all_variants)
        )


@dataclass(slots=True, frozen=True, kw_only=True)
class Product:
    id: str
    version: int
    key: str | None
    product_type_id: str
    name: LocalizedString
    slug: LocalizedString
    master_variant: ProductVariant
    variants: tuple[ProductVariant, ...] = ()
    description: LocalizedString | None = None
    meta_title: LocalizedString | None = None
    meta_description: LocalizedString | None = None
    meta_keywords: LocalizedString | None = None
    category_ids: frozenset[str] = frozenset()
    tax_category_id: str | None = None

    @property
    def all_variants(self) -> tuple[ProductVariant, ...]:
        return (self.master_variant, *self.variants)
