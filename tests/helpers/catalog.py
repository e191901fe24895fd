"""Builders for catalog drafts, existing resources and resolved references."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from catalogsync.domain.model import (
    CartDiscount,
    CartDiscountDraft,
    CartDiscountTarget,
    CartDiscountTargetType,
    CartDiscountValue,
    CartDiscountValueType,
    Category,
    CategoryDraft,
    InventoryEntry,
    InventoryEntryDraft,
    Money,
    Price,
    PriceDraft,
    Product,
    ProductDraft,
    ProductVariant,
    ProductVariantDraft,
    ReferenceKey,
    ReferenceKind,
)
from catalogsync.domain.reconciliation import ResolvedReferences
from catalogsync.sync import SyncOptions

DEFAULT_OPTIONS: SyncOptions[Any, Any] = SyncOptions()
KEEP_OPTIONS: SyncOptions[Any, Any] = SyncOptions(
    remove_other_locales=False,
    remove_other_set_entries=False,
    remove_other_collection_entries=False,
    remove_other_properties=False,
)


def make_references(**by_kind: dict[str, str]) -> ResolvedReferences:
    """Build references from ``kind_name={key: id}`` keyword groups.

    Kind names use underscores, e.g. ``product_type={"shirt": "pt-1"}``.
    """

    ids: dict[ReferenceKey, str] = {}
    for kind_name, mapping in by_kind.items():
        kind = ReferenceKind(kind_name.replace("_", "-"))
        for key, resource_id in mapping.items():
            ids[ReferenceKey(kind, key)] = resource_id
    return ResolvedReferences.of(ids)


def eur(cent_amount: int) -> Money:
    return Money(cent_amount=cent_amount, currency="EUR")


def make_price_draft(cent_amount: int = 1000, **overrides: Any) -> PriceDraft:
    return replace(PriceDraft(value=eur(cent_amount)), **overrides)


def make_price(price_id: str, cent_amount: int = 1000, **overrides: Any) -> Price:
    return replace(Price(id=price_id, value=eur(cent_amount)), **overrides)


def make_variant_draft(key: str = "v1", **overrides: Any) -> ProductVariantDraft:
    return replace(ProductVariantDraft(key=key, sku=f"sku-{key}"), **overrides)


def make_variant(variant_id: int = 1, key: str = "v1", **overrides: Any) -> ProductVariant:
    return replace(ProductVariant(id=variant_id, key=key, sku=f"sku-{key}"), **overrides)


def make_product_draft(key: str = "shirt", **overrides: Any) -> ProductDraft:
    draft = ProductDraft(
        key=key,
        product_type="apparel",
        name={"en": "Shirt"},
        slug={"en": key},
        master_variant=make_variant_draft("v1"),
    )
    return replace(draft, **overrides)


def make_product(key: str = "shirt", **overrides: Any) -> Product:
    product = Product(
        id=f"{key}-id",
        version=1,
        key=key,
        product_type_id="pt-apparel",
        name={"en": "Shirt"},
        slug={"en": key},
        master_variant=make_variant(1, "v1"),
    )
    return replace(product, **overrides)


def product_references(**extra: dict[str, str]) -> ResolvedReferences:
    return make_references(product_type={"apparel": "pt-apparel"}, **extra)


def make_category_draft(key: str = "shoes", **overrides: Any) -> CategoryDraft:
    draft = CategoryDraft(key=key, name={"en": key.title()}, slug={"en": key})
    return replace(draft, **overrides)


def make_category(key: str = "shoes", **overrides: Any) -> Category:
    category = Category(
        id=f"{key}-id", version=1, key=key, name={"en": key.title()}, slug={"en": key}
    )
    return replace(category, **overrides)


def relative(permyriad: int) -> CartDiscountValue:
    return CartDiscountValue(type=CartDiscountValueType.RELATIVE, permyriad=permyriad)


def line_items(predicate: str = "1 = 1") -> CartDiscountTarget:
    return CartDiscountTarget(type=CartDiscountTargetType.LINE_ITEMS, predicate=predicate)


def make_cart_discount_draft(key: str = "summer", **overrides: Any) -> CartDiscountDraft:
    draft = CartDiscountDraft(
        key=key,
        name={"en": "Summer sale"},
        cart_predicate="1 = 1",
        value=relative(1000),
        sort_order="0.1",
        target=line_items(),
    )
    return replace(draft, **overrides)


def make_cart_discount(key: str = "summer", **overrides: Any) -> CartDiscount:
    discount = CartDiscount(
        id=f"{key}-id",
        version=1,
        key=key,
        name={"en": "Summer sale"},
        cart_predicate="1 = 1",
        value=relative(1000),
        sort_order="0.1",
        target=line_items(),
    )
    return replace(discount, **overrides)


def make_inventory_draft(sku: str = "sku-1", **overrides: Any) -> InventoryEntryDraft:
    return replace(InventoryEntryDraft(sku=sku, quantity_on_stock=10), **overrides)


def make_inventory_entry(sku: str = "sku-1", **overrides: Any) -> InventoryEntry:
    entry = InventoryEntry(id=f"{sku}-inv", version=1, sku=sku, quantity_on_stock=10)
    return replace(entry, **overrides)
