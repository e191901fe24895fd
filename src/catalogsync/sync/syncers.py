"""Per resource kind behaviour plugged into the sync engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from catalogsync.domain.diff import (
    build_cart_discount_actions,
    build_category_actions,
    build_inventory_actions,
    build_product_actions,
    product_type_warning,
)
from catalogsync.domain.reconciliation import (
    order_cart_discount_actions,
    order_category_actions,
    order_inventory_actions,
    order_product_actions,
)

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.diff import DiffOptions
    from catalogsync.domain.model import (
        CartDiscount,
        CartDiscountDraft,
        Category,
        CategoryDraft,
        InventoryEntry,
        InventoryEntryDraft,
        Product,
        ProductDraft,
    )
    from catalogsync.domain.reconciliation import ResolvedReferences


class ResourceSyncer[TDraft, TResource](Protocol):
    """Diffing, ordering and reporting label of one resource kind."""

    @property
    def label(self) -> str: ...

    def build_actions(
        self,
        existing: TResource,
        draft: TDraft,
        references: ResolvedReferences,
        options: DiffOptions,
    ) -> list[UpdateAction]:
        """Return the ordered actions turning ``existing`` into ``draft``."""
        ...

    def warnings(
        self,
        existing: TResource,
        draft: TDraft,
        references: ResolvedReferences,
    ) -> list[str]: ...


class ProductSyncer:
    label = "products"

    def build_actions(
        self,
        existing: Product,
        draft: ProductDraft,
        references: ResolvedReferences,
        options: DiffOptions,
    ) -> list[UpdateAction]:
        actions = build_product_actions(existing, draft, references, options)
        return order_product_actions(actions, existing.master_variant.id)

    def warnings(
        self,
        existing: Product,
        draft: ProductDraft,
        references: ResolvedReferences,
    ) -> list[str]:
        warning = product_type_warning(existing, draft, references)
        return [warning] if warning is not None else []


class CategorySyncer:
    label = "categories"

    def build_actions(
        self,
        existing: Category,
        draft: CategoryDraft,
        references: ResolvedReferences,
        options: DiffOptions,
    ) -> list[UpdateAction]:
        actions = build_category_actions(existing, draft, references, options)
        return order_category_actions(actions)

    def warnings(
        self,
        existing: Category,
        draft: CategoryDraft,
        references: ResolvedReferences,
    ) -> list[str]:
        return []


class CartDiscountSyncer:
    label = "cart discounts"

    def build_actions(
        self,
        existing: CartDiscount,
        draft: CartDiscountDraft,
        references: ResolvedReferences,
        options: DiffOptions,
    ) -> list[UpdateAction]:
        actions = build_cart_discount_actions(existing, draft, references, options)
        return order_cart_discount_actions(actions)

    def warnings(
        self,
        existing: CartDiscount,
        draft: CartDiscountDraft,
        references: ResolvedReferences,
    ) -> list[str]:
        return []


class InventorySyncer:
    label = "inventory entries"

    def build_actions(
        self,
        existing: InventoryEntry,
        draft: InventoryEntryDraft,
        references: ResolvedReferences,
        options: DiffOptions,
    ) -> list[UpdateAction]:
        actions = build_inventory_actions(existing, draft, references, options)
        return order_inventory_actions(actions)

    def warnings(
        self,
        existing: InventoryEntry,
        draft: InventoryEntryDraft,
        references: ResolvedReferences,
    ) -> list[str]:
        return []
