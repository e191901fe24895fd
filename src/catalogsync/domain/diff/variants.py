"""Product variant diffing; variants are matched by key."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogsync.domain.actions import AddVariant, ChangeMasterVariant, RemoveVariant, SetSku
from catalogsync.domain.errors import DiffError

from .assets import build_asset_actions
from .attributes import build_attribute_actions
from .custom import resolve_custom
from .images import build_image_actions
from .prices import build_price_actions, resolve_price

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import Product, ProductDraft, ProductVariant, ProductVariantDraft
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


def build_variant_actions(
    existing: Product,
    draft: ProductDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    """Diff all variants of a product, including a change of the master variant.

    Existing variants missing from the draft are always removed; the draft
    describes the complete set of variants.
    """

    existing_by_key = {
        variant.key: variant for variant in existing.all_variants if variant.key is not None
    }
    draft_keys = {variant.key for variant in draft.all_variants}

    actions: list[UpdateAction] = [
        RemoveVariant(variant_id=variant.id)
        for variant in existing.all_variants
        if variant.key not in draft_keys
    ]
    for variant_draft in draft.all_variants:
        current = existing_by_key.get(variant_draft.key)
        if current is None:
            actions.append(_add_variant(variant_draft, references))
        else:
            actions.extend(_variant_content_actions(current, variant_draft, references, options))

    master_key = draft.master_variant.key
    if master_key != existing.master_variant.key:
        actions.append(_change_master(draft, existing_by_key.get(master_key)))
    return actions


def _variant_content_actions(
    current: ProductVariant,
    draft: ProductVariantDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    variant_id = current.id
    actions: list[UpdateAction] = []
    if draft.sku != current.sku and (draft.sku is not None or options.remove_other_properties):
        actions.append(SetSku(variant_id=variant_id, sku=draft.sku))
    actions.extend(
        build_attribute_actions(variant_id, current.attributes, draft.attributes, options)
    )
    actions.extend(
        build_price_actions(variant_id, current.prices, draft.prices, references, options)
    )
    actions.extend(build_image_actions(variant_id, current.images, draft.images, options))
    actions.extend(
        build_asset_actions(
            current.assets, draft.assets, references, options, variant_id=variant_id
        )
    )
    return actions


def _add_variant(draft: ProductVariantDraft, references: ResolvedReferences) -> AddVariant:
    return AddVariant(
        key=draft.key,
        sku=draft.sku,
        attributes=dict(draft.attributes),
        prices=tuple(resolve_price(price, references) for price in draft.prices),
        images=draft.images,
        assets=tuple(
            replace(asset, custom=resolve_custom(asset.custom, references))
            for asset in draft.assets
        ),
    )


def _change_master(draft: ProductDraft, current: ProductVariant | None) -> ChangeMasterVariant:
    """Address the new master by sku when possible, by id when it already exists."""

    master = draft.master_variant
    if master.sku is not None:
        return ChangeMasterVariant(sku=master.sku)
    if current is not None:
        return ChangeMasterVariant(variant_id=current.id)
    raise DiffError(
        f"New master variant '{master.key}' of product '{draft.key}' needs a sku",
        key=draft.key,
    )
