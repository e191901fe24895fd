"""Attribute, price, image and asset diffing of one variant."""

from __future__ import annotations

from catalogsync.domain.actions import (
    AddAsset,
    AddExternalImage,
    AddPrice,
    ChangeAssetName,
    ChangeAssetOrder,
    ChangePrice,
    MoveImageToPosition,
    RemoveAsset,
    RemoveImage,
    RemovePrice,
    SetAssetCustomType,
    SetAssetDescription,
    SetAssetTags,
    SetAttribute,
    SetProductPriceCustomField,
)
from catalogsync.domain.diff.assets import build_asset_actions
from catalogsync.domain.diff.attributes import build_attribute_actions
from catalogsync.domain.diff.images import build_image_actions
from catalogsync.domain.diff.prices import build_price_actions
from catalogsync.domain.model import (
    Asset,
    AssetDraft,
    CustomFields,
    CustomFieldsDraft,
    Image,
)

from tests.helpers.catalog import (
    DEFAULT_OPTIONS,
    KEEP_OPTIONS,
    make_price,
    make_price_draft,
    make_references,
)

REFERENCES = make_references(
    channel={"store": "ch-store"},
    customer_group={"b2b": "cg-b2b"},
    type={"price-meta": "t-price", "asset-meta": "t-asset"},
)


def _images(*urls: str) -> tuple[Image, ...]:
    return tuple(Image(url=url) for url in urls)


# attributes


def test_attribute_changes_and_unsets() -> None:
    existing = {"size": "M", "color": "red", "fit": "slim"}
    draft = {"size": "L", "fit": "slim", "material": "cotton"}

    assert build_attribute_actions(1, existing, draft, DEFAULT_OPTIONS) == [
        SetAttribute(variant_id=1, name="size", value="L"),
        SetAttribute(variant_id=1, name="material", value="cotton"),
        SetAttribute(variant_id=1, name="color"),
    ]
    assert build_attribute_actions(1, existing, draft, KEEP_OPTIONS) == [
        SetAttribute(variant_id=1, name="size", value="L"),
        SetAttribute(variant_id=1, name="material", value="cotton"),
    ]


# prices


def test_prices_matched_by_scope() -> None:
    existing = (make_price("p1", 1000), make_price("p2", 500, country="DE"))
    draft = (make_price_draft(1200), make_price_draft(700, country="AT"))

    assert build_price_actions(1, existing, draft, REFERENCES, DEFAULT_OPTIONS) == [
        RemovePrice(price_id="p2"),
        ChangePrice(price_id="p1", price=make_price_draft(1200)),
        AddPrice(variant_id=1, price=make_price_draft(700, country="AT")),
    ]
    assert build_price_actions(1, existing, draft, REFERENCES, KEEP_OPTIONS) == [
        ChangePrice(price_id="p1", price=make_price_draft(1200)),
        AddPrice(variant_id=1, price=make_price_draft(700, country="AT")),
    ]


def test_price_scope_uses_resolved_references() -> None:
    existing = (make_price("p1", channel_id="ch-store", customer_group_id="cg-b2b"),)
    same = (make_price_draft(channel="store", customer_group="b2b"),)
    other_channel = (make_price_draft(customer_group="b2b"),)

    assert build_price_actions(1, existing, same, REFERENCES, DEFAULT_OPTIONS) == []
    assert build_price_actions(1, existing, other_channel, REFERENCES, DEFAULT_OPTIONS) == [
        RemovePrice(price_id="p1"),
        AddPrice(variant_id=1, price=make_price_draft(customer_group="cg-b2b")),
    ]


def test_added_price_carries_resolved_ids() -> None:
    draft = (
        make_price_draft(
            channel="store", custom=CustomFieldsDraft(type="price-meta", fields={"note": "x"})
        ),
    )

    (action,) = build_price_actions(1, (), draft, REFERENCES, DEFAULT_OPTIONS)

    assert action == AddPrice(
        variant_id=1,
        price=make_price_draft(
            channel="ch-store", custom=CustomFieldsDraft(type="t-price", fields={"note": "x"})
        ),
    )


def test_price_custom_fields_are_diffed() -> None:
    existing = (make_price("p1", custom=CustomFields(type_id="t-price", fields={"note": "a"})),)
    draft = (make_price_draft(custom=CustomFieldsDraft(type="price-meta", fields={"note": "b"})),)

    assert build_price_actions(1, existing, draft, REFERENCES, DEFAULT_OPTIONS) == [
        SetProductPriceCustomField(price_id="p1", name="note", value="b")
    ]


# images


def test_images_removed_added_and_moved() -> None:
    actions = build_image_actions(
        1, _images("a", "b", "c"), _images("c", "a", "d"), DEFAULT_OPTIONS
    )

    assert actions == [
        RemoveImage(variant_id=1, image_url="b"),
        AddExternalImage(variant_id=1, image=Image(url="d")),
        MoveImageToPosition(variant_id=1, image_url="c", position=0),
    ]


def test_kept_images_move_behind_draft_images() -> None:
    actions = build_image_actions(
        1, _images("a", "b", "c"), _images("c", "a", "d"), KEEP_OPTIONS
    )

    assert actions == [
        AddExternalImage(variant_id=1, image=Image(url="d")),
        MoveImageToPosition(variant_id=1, image_url="c", position=0),
        MoveImageToPosition(variant_id=1, image_url="d", position=2),
    ]


def test_unchanged_images_produce_nothing() -> None:
    images = _images("a", "b")

    assert build_image_actions(1, images, images, DEFAULT_OPTIONS) == []
    assert build_image_actions(1, images, _images("a", "b", "a"), DEFAULT_OPTIONS) == []


# assets


EXISTING_ASSETS = (
    Asset(id="a1", key="manual", name={"en": "Manual"}),
    Asset(id="a2", key="photo", name={"en": "Photo"}),
    Asset(id="a3", key="old", name={"en": "Old"}),
)
DRAFT_ASSETS = (
    AssetDraft(key="photo", name={"en": "Photo"}),
    AssetDraft(key="manual", name={"en": "User manual"}),
    AssetDraft(key="video", name={"en": "Video"}),
)


def test_assets_removed_changed_reordered_and_added() -> None:
    actions = build_asset_actions(
        EXISTING_ASSETS, DRAFT_ASSETS, REFERENCES, DEFAULT_OPTIONS, variant_id=1
    )

    assert actions == [
        RemoveAsset(asset_key="old", variant_id=1),
        ChangeAssetName(asset_key="manual", name={"en": "User manual"}, variant_id=1),
        ChangeAssetOrder(asset_order=("a2", "a1"), variant_id=1),
        AddAsset(asset=DRAFT_ASSETS[2], position=2, variant_id=1),
    ]


def test_kept_assets_stay_behind_the_draft_order() -> None:
    actions = build_asset_actions(EXISTING_ASSETS, DRAFT_ASSETS, REFERENCES, KEEP_OPTIONS)

    assert actions == [
        ChangeAssetName(asset_key="manual", name={"en": "User manual"}),
        ChangeAssetOrder(asset_order=("a2", "a1", "a3")),
        AddAsset(asset=DRAFT_ASSETS[2], position=2),
    ]


def test_asset_tags_description_and_custom_type() -> None:
    existing = (
        Asset(
            id="a1",
            key="manual",
            name={"en": "Manual"},
            description={"en": "PDF"},
            tags=frozenset({"pdf", "legacy"}),
        ),
    )
    draft = (
        AssetDraft(
            key="manual",
            name={"en": "Manual"},
            tags=frozenset({"pdf", "print"}),
            custom=CustomFieldsDraft(type="asset-meta"),
        ),
    )

    assert build_asset_actions(existing, draft, REFERENCES, DEFAULT_OPTIONS) == [
        SetAssetDescription(asset_key="manual"),
        SetAssetTags(asset_key="manual", tags=frozenset({"pdf", "print"})),
        SetAssetCustomType(asset_key="manual", type_id="t-asset"),
    ]
    assert build_asset_actions(existing, draft, REFERENCES, KEEP_OPTIONS) == [
        SetAssetTags(asset_key="manual", tags=frozenset({"pdf", "print", "legacy"})),
        SetAssetCustomType(asset_key="manual", type_id="t-asset"),
    ]
