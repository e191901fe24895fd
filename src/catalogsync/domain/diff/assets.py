"""Asset diffing for product variants and categories; assets are matched by key."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogsync.domain.actions import (
    AddAsset,
    ChangeAssetName,
    ChangeAssetOrder,
    RemoveAsset,
    SetAssetCustomField,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetSources,
    SetAssetTags,
)

from .custom import build_custom_actions, resolve_custom
from .fields import desired_entries, desired_localized

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.actions import AssetAction
    from catalogsync.domain.model import Asset, AssetDraft
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


def build_asset_actions(
    existing: Sequence[Asset],
    draft: Sequence[AssetDraft],
    references: ResolvedReferences,
    options: DiffOptions,
    *,
    variant_id: int | None = None,
) -> list[AssetAction]:
    """Diff the assets of one owner (a product variant or a category).

    Emits removals, content changes of matched assets, a single reorder of
    the assets that stay, and additions at their draft position. Existing
    assets without a key cannot be addressed and are only ever reordered to
    the back.
    """

    existing_by_key = {asset.key: asset for asset in existing if asset.key is not None}
    draft_keys = {asset.key for asset in draft}

    actions: list[AssetAction] = []
    removed: set[str] = set()
    if options.remove_other_collection_entries:
        for asset in existing:
            if asset.key is not None and asset.key not in draft_keys:
                removed.add(asset.id)
                actions.append(RemoveAsset(asset_key=asset.key, variant_id=variant_id))

    for asset_draft in draft:
        current = existing_by_key.get(asset_draft.key)
        if current is not None:
            actions.extend(
                _asset_content_actions(current, asset_draft, references, options, variant_id)
            )

    remaining = [asset.id for asset in existing if asset.id not in removed]
    matched = [
        existing_by_key[asset.key].id for asset in draft if asset.key in existing_by_key
    ]
    desired_order = [*matched, *(asset_id for asset_id in remaining if asset_id not in matched)]
    if desired_order != remaining:
        actions.append(ChangeAssetOrder(asset_order=tuple(desired_order), variant_id=variant_id))

    actions.extend(
        AddAsset(
            asset=replace(asset_draft, custom=resolve_custom(asset_draft.custom, references)),
            position=position,
            variant_id=variant_id,
        )
        for position, asset_draft in enumerate(draft)
        if asset_draft.key not in existing_by_key
    )
    return actions


def _asset_content_actions(
    current: Asset,
    draft: AssetDraft,
    references: ResolvedReferences,
    options: DiffOptions,
    variant_id: int | None,
) -> list[AssetAction]:
    key = draft.key
    actions: list[AssetAction] = []

    name = desired_localized(current.name, draft.name, options)
    if name != dict(current.name):
        actions.append(ChangeAssetName(asset_key=key, name=name, variant_id=variant_id))

    if draft.description is not None:
        description = desired_localized(current.description, draft.description, options)
        if description != dict(current.description or {}):
            actions.append(
                SetAssetDescription(asset_key=key, description=description, variant_id=variant_id)
            )
    elif current.description and options.remove_other_properties:
        actions.append(SetAssetDescription(asset_key=key, variant_id=variant_id))

    tags = desired_entries(current.tags, draft.tags, options)
    if tags != current.tags:
        actions.append(SetAssetTags(asset_key=key, tags=tags, variant_id=variant_id))

    if draft.sources != current.sources:
        actions.append(SetAssetSources(asset_key=key, sources=draft.sources, variant_id=variant_id))

    actions.extend(
        build_custom_actions(
            current.custom,
            draft.custom,
            references,
            options,
            set_type=lambda type_id, fields: SetAssetCustomType(
                asset_key=key, type_id=type_id, fields=fields, variant_id=variant_id
            ),
            set_field=lambda name, value: SetAssetCustomField(
                asset_key=key, name=name, value=value, variant_id=variant_id
            ),
        )
    )
    return actions
