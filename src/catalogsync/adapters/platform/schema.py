"""Pydantic models describing catalog platform payloads and draft files."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from catalogsync.domain.model import (
    CartDiscountTargetType,
    CartDiscountValueType,
    StackingMode,
)

type LocalizedStringPayload = dict[str, str]


class PlatformModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, alias_generator=to_camel)


# shared building blocks


class ReferencePayload(PlatformModel):
    id: str
    type_id: str | None = None


class KeyedResourcePayload(PlatformModel):
    id: str
    key: str | None = None


class QueryResponse(PlatformModel):
    results: list[dict[str, object]] = Field(default_factory=list[dict[str, object]])
    total: int | None = None


class ErrorPayload(PlatformModel):
    code: str | None = None
    message: str | None = None
    current_version: int | None = None


class ErrorResponse(PlatformModel):
    status_code: int | None = None
    message: str | None = None
    errors: list[ErrorPayload] = Field(default_factory=list[ErrorPayload])

    @property
    def current_version(self) -> int | None:
        for error in self.errors:
            if error.current_version is not None:
                return error.current_version
        return None


class MoneyPayload(PlatformModel):
    cent_amount: int
    currency_code: str


class DimensionsPayload(PlatformModel):
    w: int
    h: int


class ImagePayload(PlatformModel):
    url: str
    dimensions: DimensionsPayload | None = None
    label: str | None = None


class AssetSourcePayload(PlatformModel):
    uri: str
    key: str | None = None
    content_type: str | None = None
    dimensions: DimensionsPayload | None = None


class AttributePayload(PlatformModel):
    name: str
    value: object = None


# existing resources


class CustomFieldsPayload(PlatformModel):
    type: ReferencePayload
    fields: dict[str, object] = Field(default_factory=dict[str, object])


class AssetPayload(PlatformModel):
    id: str
    key: str | None = None
    name: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    tags: list[str] = Field(default_factory=list[str])
    sources: list[AssetSourcePayload] = Field(default_factory=list[AssetSourcePayload])
    custom: CustomFieldsPayload | None = None


class PricePayload(PlatformModel):
    id: str
    value: MoneyPayload
    country: str | None = None
    customer_group: ReferencePayload | None = None
    channel: ReferencePayload | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    custom: CustomFieldsPayload | None = None


class VariantPayload(PlatformModel):
    id: int
    key: str | None = None
    sku: str | None = None
    attributes: list[AttributePayload] = Field(default_factory=list[AttributePayload])
    prices: list[PricePayload] = Field(default_factory=list[PricePayload])
    images: list[ImagePayload] = Field(default_factory=list[ImagePayload])
    assets: list[AssetPayload] = Field(default_factory=list[AssetPayload])


class ProductPayload(PlatformModel):
    """A product as flattened staged data.

    Queries return projections in this shape already; create and update
    responses nest the data under ``masterData.staged`` and are flattened here.
    """

    id: str
    version: int
    key: str | None = None
    product_type: ReferencePayload
    name: LocalizedStringPayload
    slug: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    meta_title: LocalizedStringPayload | None = None
    meta_description: LocalizedStringPayload | None = None
    meta_keywords: LocalizedStringPayload | None = None
    master_variant: VariantPayload
    variants: list[VariantPayload] = Field(default_factory=list[VariantPayload])
    categories: list[ReferencePayload] = Field(default_factory=list[ReferencePayload])
    tax_category: ReferencePayload | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_master_data(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        master_data = mapping_value.get("masterData")
        if not isinstance(master_data, Mapping):
            return mapping_value
        staged = cast(Mapping[str, object], master_data).get("staged")
        if not isinstance(staged, Mapping):
            return mapping_value
        data: dict[str, object] = {
            name: item for name, item in mapping_value.items() if name != "masterData"
        }
        data.update(cast(Mapping[str, object], staged))
        return data


class CategoryPayload(PlatformModel):
    id: str
    version: int
    key: str | None = None
    name: LocalizedStringPayload
    slug: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    parent: ReferencePayload | None = None
    order_hint: str | None = None
    external_id: str | None = None
    meta_title: LocalizedStringPayload | None = None
    meta_description: LocalizedStringPayload | None = None
    meta_keywords: LocalizedStringPayload | None = None
    assets: list[AssetPayload] = Field(default_factory=list[AssetPayload])
    custom: CustomFieldsPayload | None = None


class CartDiscountValuePayload(PlatformModel):
    type: CartDiscountValueType
    permyriad: int | None = None
    money: list[MoneyPayload] = Field(default_factory=list[MoneyPayload])
    product: ReferencePayload | None = None
    variant_id: int | None = None
    supply_channel: ReferencePayload | None = None
    distribution_channel: ReferencePayload | None = None


class CartDiscountTargetPayload(PlatformModel):
    type: CartDiscountTargetType
    predicate: str | None = None


class CartDiscountPayload(PlatformModel):
    id: str
    version: int
    key: str | None = None
    name: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    value: CartDiscountValuePayload
    cart_predicate: str
    target: CartDiscountTargetPayload | None = None
    sort_order: str
    is_active: bool = True
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    requires_discount_code: bool = False
    stacking_mode: StackingMode = StackingMode.STACKING
    custom: CustomFieldsPayload | None = None


class ExpandedReferencePayload(PlatformModel):
    """A reference requested with ``expand``; ``obj`` carries the referenced resource."""

    id: str
    type_id: str | None = None
    obj: KeyedResourcePayload | None = None


class InventoryEntryPayload(PlatformModel):
    id: str
    version: int
    sku: str
    quantity_on_stock: int
    available_quantity: int | None = None
    supply_channel: ExpandedReferencePayload | None = None
    restockable_in_days: int | None = None
    expected_delivery: datetime | None = None
    custom: CustomFieldsPayload | None = None


# draft files: references are given by key


class CustomFieldsDraftPayload(PlatformModel):
    type: str
    fields: dict[str, object] = Field(default_factory=dict[str, object])


class CartDiscountValueDraftPayload(PlatformModel):
    type: CartDiscountValueType
    permyriad: int | None = None
    money: list[MoneyPayload] = Field(default_factory=list[MoneyPayload])
    product: str | None = None
    variant_id: int | None = None
    supply_channel: str | None = None
    distribution_channel: str | None = None


class AssetDraftPayload(PlatformModel):
    key: str
    name: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    tags: list[str] = Field(default_factory=list[str])
    sources: list[AssetSourcePayload] = Field(default_factory=list[AssetSourcePayload])
    custom: CustomFieldsDraftPayload | None = None


class PriceDraftPayload(PlatformModel):
    value: MoneyPayload
    country: str | None = None
    customer_group: str | None = None
    channel: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    custom: CustomFieldsDraftPayload | None = None


class VariantDraftPayload(PlatformModel):
    key: str | None = None
    sku: str | None = None
    attributes: list[AttributePayload] = Field(default_factory=list[AttributePayload])
    prices: list[PriceDraftPayload] = Field(default_factory=list[PriceDraftPayload])
    images: list[ImagePayload] = Field(default_factory=list[ImagePayload])
    assets: list[AssetDraftPayload] = Field(default_factory=list[AssetDraftPayload])


class ProductDraftPayload(PlatformModel):
    key: str | None = None
    product_type: str
    name: LocalizedStringPayload
    slug: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    meta_title: LocalizedStringPayload | None = None
    meta_description: LocalizedStringPayload | None = None
    meta_keywords: LocalizedStringPayload | None = None
    master_variant: VariantDraftPayload
    variants: list[VariantDraftPayload] = Field(default_factory=list[VariantDraftPayload])
    categories: list[str] = Field(default_factory=list[str])
    tax_category: str | None = None


class CategoryDraftPayload(PlatformModel):
    key: str | None = None
    name: LocalizedStringPayload
    slug: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    parent: str | None = None
    order_hint: str | None = None
    external_id: str | None = None
    meta_title: LocalizedStringPayload | None = None
    meta_description: LocalizedStringPayload | None = None
    meta_keywords: LocalizedStringPayload | None = None
    assets: list[AssetDraftPayload] = Field(default_factory=list[AssetDraftPayload])
    custom: CustomFieldsDraftPayload | None = None


class CartDiscountDraftPayload(PlatformModel):
    key: str | None = None
    name: LocalizedStringPayload
    description: LocalizedStringPayload | None = None
    value: CartDiscountValueDraftPayload
    cart_predicate: str
    target: CartDiscountTargetPayload | None = None
    sort_order: str
    is_active: bool = True
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    requires_discount_code: bool = False
    stacking_mode: StackingMode = StackingMode.STACKING
    custom: CustomFieldsDraftPayload | None = None


class InventoryEntryDraftPayload(PlatformModel):
    sku: str
    quantity_on_stock: int
    supply_channel: str | None = None
    restockable_in_days: int | None = None
    expected_delivery: datetime | None = None
    custom: CustomFieldsDraftPayload | None = None
