"""Product diffing: resource fields, categories and variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import AddToCategory, RemoveFromCategory
from catalogsync.domain.model import ReferenceKind

from .fields import build_localized_field, build_set_field, diff_entries
from .variants import build_variant_actions

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import Product, ProductDraft
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions

LOCALIZED_FIELDS = (
    "name",
    "slug",
    "description",
    "meta_title",
    "meta_description",
    "meta_keywords",
)


def build_product_actions(
    existing: Product,
    draft: ProductDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    """Unordered update actions turning ``existing`` into ``draft``.

    The product type is never part of the result, see :func:`product_type_warning`.
    """

    actions: list[UpdateAction] = []
    for field in LOCALIZED_FIELDS:
        actions.extend(
            build_localized_field(field, getattr(existing, field), getattr(draft, field), options)
        )

    tax_category_id = references.optional_id_for(ReferenceKind.TAX_CATEGORY, draft.tax_category)
    actions.extend(
        build_set_field("tax_category", existing.tax_category_id, tax_category_id, options)
    )

    category_ids = frozenset(
        references.id_for(ReferenceKind.CATEGORY, key) for key in draft.categories
    )
    added, removed = diff_entries(existing.category_ids, category_ids, options)
    actions.extend(RemoveFromCategory(category_id=category_id) for category_id in removed)
    actions.extend(AddToCategory(category_id=category_id) for category_id in added)

    actions.extend(build_variant_actions(existing, draft, references, options))
    return actions


def product_type_warning(
    existing: Product,
    draft: ProductDraft,
    references: ResolvedReferences,
) -> str | None:
    """Describe a product type mismatch; the platform cannot change it in place."""

    product_type_id = references.id_for(ReferenceKind.PRODUCT_TYPE, draft.product_type)
    if product_type_id == existing.product_type_id:
        return None
    return (
        f"Product '{draft.key}' has product type '{existing.product_type_id}' but the draft "
        f"references '{draft.product_type}'; the product type is left unchanged"
    )
