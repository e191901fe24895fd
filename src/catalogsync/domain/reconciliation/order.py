"""Order update actions so the platform can apply them in sequence.

Two levels of priority are applied, both as stable sorts so ties keep the
order in which the diff builders emitted them:

1. Facet tables (attributes, prices, images, assets) reorder the actions of
   one facet of one variant among themselves, in place, at the position the
   first action of that group occupied.
2. The variant table orders the whole list: removal of non-master variants,
   variant content changes, resource level changes, new variants, master
   change and finally removal of the former master variant.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, assert_never

from catalogsync.domain.actions import (
    AddAsset,
    AddExternalImage,
    AddPrice,
    AddToCategory,
    AddVariant,
    ChangeAssetName,
    ChangeAssetOrder,
    ChangeCartPredicate,
    ChangeMasterVariant,
    ChangePrice,
    ChangeQuantity,
    ChangeTarget,
    ChangeValue,
    MoveImageToPosition,
    RemoveAsset,
    RemoveFromCategory,
    RemoveImage,
    RemovePrice,
    RemoveVariant,
    SetAssetCustomField,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetSources,
    SetAssetTags,
    SetAttribute,
    SetCustomField,
    SetCustomType,
    SetField,
    SetProductPriceCustomField,
    SetProductPriceCustomType,
    SetSku,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from catalogsync.domain.actions import UpdateAction


class Facet(StrEnum):
    ATTRIBUTE = "attribute"
    PRICE = "price"
    IMAGE = "image"
    ASSET = "asset"


type FacetRank = tuple[Facet, int | None, int]
type _GroupKey = tuple[Facet, int | None]


def facet_rank(action: UpdateAction) -> FacetRank | None:
    """Return ``(facet, variant id, priority)`` or ``None`` outside every facet table.

    Price actions addressed by price id carry no variant id; they share one
    group, which only ever reorders removals ahead of changes and additions.
    """

    match action:
        case SetAttribute(variant_id=variant_id):
            return Facet.ATTRIBUTE, variant_id, 0 if action.is_unset else 1
        case RemovePrice():
            return Facet.PRICE, None, 0
        case ChangePrice() | SetProductPriceCustomType() | SetProductPriceCustomField():
            return Facet.PRICE, None, 1
        case AddPrice():
            return Facet.PRICE, None, 2
        case RemoveImage(variant_id=variant_id):
            return Facet.IMAGE, variant_id, 0
        case AddExternalImage(variant_id=variant_id):
            return Facet.IMAGE, variant_id, 1
        case MoveImageToPosition(variant_id=variant_id):
            return Facet.IMAGE, variant_id, 2
        case RemoveAsset(variant_id=variant_id):
            return Facet.ASSET, variant_id, 0
        case (
            ChangeAssetName(variant_id=variant_id)
            | SetAssetDescription(variant_id=variant_id)
            | SetAssetTags(variant_id=variant_id)
            | SetAssetSources(variant_id=variant_id)
            | SetAssetCustomType(variant_id=variant_id)
            | SetAssetCustomField(variant_id=variant_id)
        ):
            return Facet.ASSET, variant_id, 1
        case ChangeAssetOrder(variant_id=variant_id):
            return Facet.ASSET, variant_id, 2
        case AddAsset(variant_id=variant_id):
            return Facet.ASSET, variant_id, 3
        case (
            SetField()
            | AddToCategory()
            | RemoveFromCategory()
            | SetCustomType()
            | SetCustomField()
            | ChangeValue()
            | ChangeCartPredicate()
            | ChangeTarget()
            | ChangeQuantity()
            | AddVariant()
            | RemoveVariant()
            | ChangeMasterVariant()
            | SetSku()
        ):
            return None
        case _:
            assert_never(action)


def variant_priority(action: UpdateAction, master_variant_id: int | None) -> int:
    match action:
        case RemoveVariant(variant_id=variant_id):
            return 5 if variant_id == master_variant_id else 0
        case (
            SetSku()
            | SetAttribute()
            | AddPrice()
            | RemovePrice()
            | ChangePrice()
            | SetProductPriceCustomType()
            | SetProductPriceCustomField()
            | AddExternalImage()
            | RemoveImage()
            | MoveImageToPosition()
            | AddAsset()
            | RemoveAsset()
            | ChangeAssetOrder()
            | ChangeAssetName()
            | SetAssetDescription()
            | SetAssetTags()
            | SetAssetSources()
            | SetAssetCustomType()
            | SetAssetCustomField()
        ):
            return 1
        case (
            SetField()
            | AddToCategory()
            | RemoveFromCategory()
            | SetCustomType()
            | SetCustomField()
            | ChangeValue()
            | ChangeCartPredicate()
            | ChangeTarget()
            | ChangeQuantity()
        ):
            return 2
        case AddVariant():
            return 3
        case ChangeMasterVariant():
            return 4
        case _:
            assert_never(action)


def order_facets(actions: Iterable[UpdateAction]) -> list[UpdateAction]:
    """Sort each (facet, variant) group by its facet table, keeping group positions."""

    slots: list[UpdateAction | _GroupKey] = []
    groups: dict[_GroupKey, list[tuple[int, UpdateAction]]] = {}
    for action in actions:
        rank = facet_rank(action)
        if rank is None:
            slots.append(action)
            continue
        facet, variant_id, priority = rank
        group_key = (facet, variant_id)
        if group_key not in groups:
            groups[group_key] = []
            slots.append(group_key)
        groups[group_key].append((priority, action))

    ordered: list[UpdateAction] = []
    for slot in slots:
        if isinstance(slot, tuple):
            members = sorted(groups[slot], key=lambda member: member[0])
            ordered.extend(action for _, action in members)
        else:
            ordered.append(slot)
    return ordered


def order_product_actions(
    actions: Iterable[UpdateAction], master_variant_id: int | None
) -> list[UpdateAction]:
    """Order product actions; ``master_variant_id`` is the existing master's id."""

    return sorted(
        order_facets(actions),
        key=lambda action: variant_priority(action, master_variant_id),
    )


def order_category_actions(actions: Iterable[UpdateAction]) -> list[UpdateAction]:
    return order_facets(actions)


def order_cart_discount_actions(actions: Iterable[UpdateAction]) -> list[UpdateAction]:
    """Cart discount actions are independent of each other: keep builder order."""

    return list(actions)


def order_inventory_actions(actions: Iterable[UpdateAction]) -> list[UpdateAction]:
    """Quantity first, then delivery details and custom fields, as built."""

    return list(actions)
