"""Update actions: the closed set of atomic mutations the platform accepts.

Actions are plain frozen dataclasses compared structurally. ``UpdateAction``
is the union of all of them; code that behaves differently per action kind
matches on it and ends with ``assert_never`` so a new action kind has to be
handled everywhere before the type checker accepts it.

Asset actions carry an optional ``variant_id``: product variants set it,
category assets leave it ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import (
        AssetDraft,
        AssetSource,
        CartDiscountTarget,
        CartDiscountValue,
        FieldMap,
        Image,
        LocalizedString,
        PriceDraft,
    )


# resource level


@dataclass(slots=True, frozen=True, kw_only=True)
class SetField:
    """Set (or unset with ``value=None``) a simple or localized resource field."""

    field: str
    value: object | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class AddToCategory:
    category_id: str


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoveFromCategory:
    category_id: str


@dataclass(slots=True, frozen=True, kw_only=True)
class SetCustomType:
    """Replace the custom type; ``type_id=None`` removes custom fields entirely."""

    type_id: str | None
    fields: FieldMap = field(default_factory=dict[str, object])


@dataclass(slots=True, frozen=True, kw_only=True)
class SetCustomField:
    name: str
    value: object | None = None


# cart discounts


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeValue:
    value: CartDiscountValue


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeCartPredicate:
    cart_predicate: str


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeTarget:
    target: CartDiscountTarget


# inventory entries


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeQuantity:
    quantity: int


# variants


@dataclass(slots=True, frozen=True, kw_only=True)
class AddVariant:
    key: str | None
    sku: str | None = None
    attributes: FieldMap = field(default_factory=dict[str, object])
    prices: tuple[PriceDraft, ...] = ()
    images: tuple[Image, ...] = ()
    assets: tuple[AssetDraft, ...] = ()


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoveVariant:
    variant_id: int


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeMasterVariant:
    """Promote a variant, addressed by sku when it has one, else by id."""

    variant_id: int | None = None
    sku: str | None = None

    def __post_init__(self) -> None:
        if self.variant_id is None and self.sku is None:
            raise ValueError("ChangeMasterVariant needs a variant id or a sku")


@dataclass(slots=True, frozen=True, kw_only=True)
class SetSku:
    variant_id: int
    sku: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAttribute:
    variant_id: int
    name: str
    value: object | None = None

    @property
    def is_unset(self) -> bool:
        return self.value is None


# prices


@dataclass(slots=True, frozen=True, kw_only=True)
class AddPrice:
    variant_id: int
    price: PriceDraft


@dataclass(slots=True, frozen=True, kw_only=True)
class RemovePrice:
    price_id: str


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangePrice:
    price_id: str
    price: PriceDraft


@dataclass(slots=True, frozen=True, kw_only=True)
class SetProductPriceCustomType:
    price_id: str
    type_id: str | None
    fields: FieldMap = field(default_factory=dict[str, object])


@dataclass(slots=True, frozen=True, kw_only=True)
class SetProductPriceCustomField:
    price_id: str
    name: str
    value: object | None = None


# images


@dataclass(slots=True, frozen=True, kw_only=True)
class AddExternalImage:
    variant_id: int
    image: Image


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoveImage:
    variant_id: int
    image_url: str


@dataclass(slots=True, frozen=True, kw_only=True)
class MoveImageToPosition:
    variant_id: int
    image_url: str
    position: int


# assets


@dataclass(slots=True, frozen=True, kw_only=True)
class AddAsset:
    asset: AssetDraft
    position: int | None = None
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoveAsset:
    asset_key: str
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeAssetOrder:
    asset_order: tuple[str, ...]
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class ChangeAssetName:
    asset_key: str
    name: LocalizedString
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAssetDescription:
    asset_key: str
    description: LocalizedString | None = None
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAssetTags:
    asset_key: str
    tags: frozenset[str] = frozenset()
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAssetSources:
    asset_key: str
    sources: tuple[AssetSource, ...] = ()
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAssetCustomType:
    asset_key: str
    type_id: str | None
    fields: FieldMap = field(default_factory=dict[str, object])
    variant_id: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class SetAssetCustomField:
    asset_key: str
    name: str
    value: object | None = None
    variant_id: int | None = None


type AttributeAction = SetAttribute
type PriceAction = (
    AddPrice | RemovePrice | ChangePrice | SetProductPriceCustomType | SetProductPriceCustomField
)
type ImageAction = AddExternalImage | RemoveImage | MoveImageToPosition
type AssetAction = (
    AddAsset
    | RemoveAsset
    | ChangeAssetOrder
    | ChangeAssetName
    | SetAssetDescription
    | SetAssetTags
    | SetAssetSources
    | SetAssetCustomType
    | SetAssetCustomField
)
type VariantAction = AddVariant | RemoveVariant | ChangeMasterVariant | SetSku
type ResourceAction = (
    SetField
    | AddToCategory
    | RemoveFromCategory
    | SetCustomType
    | SetCustomField
    | ChangeValue
    | ChangeCartPredicate
    | ChangeTarget
    | ChangeQuantity
)
type UpdateAction = (
    ResourceAction | VariantAction | AttributeAction | PriceAction | ImageAction | AssetAction
)
