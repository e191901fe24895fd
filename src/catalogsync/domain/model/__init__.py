"""Catalog domain model: drafts, existing resources and their facets."""

from __future__ import annotations

from .base import (
    Asset,
    AssetDraft,
    AssetSource,
    CustomFields,
    CustomFieldsDraft,
    Dimensions,
    Draft,
    ExistingResource,
    FieldMap,
    Image,
    LocalizedString,
    Money,
    ReferenceKey,
    collect_reference_keys,
)
from .cart_discount import CartDiscount, CartDiscountDraft, CartDiscountTarget, CartDiscountValue
from .category import Category, CategoryDraft
from .enums import CartDiscountTargetType, CartDiscountValueType, ReferenceKind, StackingMode
from .inventory import InventoryEntry, InventoryEntryDraft, inventory_key, skus_of
from .product import (
    Price,
    PriceDraft,
    PriceScope,
    Product,
    ProductDraft,
    ProductVariant,
    ProductVariantDraft,
)

__all__ = [
    "Asset",
    "AssetDraft",
    "AssetSource",
    "CartDiscount",
    "CartDiscountDraft",
    "CartDiscountTarget",
    "CartDiscountTargetType",
    "CartDiscountValue",
    "CartDiscountValueType",
    "Category",
    "CategoryDraft",
    "CustomFields",
    "CustomFieldsDraft",
    "Dimensions",
    "Draft",
    "ExistingResource",
    "FieldMap",
    "Image",
    "InventoryEntry",
    "InventoryEntryDraft",
    "LocalizedString",
    "Money",
    "Price",
    "PriceDraft",
    "PriceScope",
    "Product",
    "ProductDraft",
    "ProductVariant",
    "ProductVariantDraft",
    "ReferenceKey",
    "ReferenceKind",
    "StackingMode",
    "collect_reference_keys",
    "inventory_key",
    "skus_of",
]
