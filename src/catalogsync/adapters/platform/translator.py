"""Translate between platform payloads and the domain model.

Three directions are covered: payloads of existing resources into domain
resources, draft files into domain drafts, and domain drafts/actions into
request bodies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime
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
from catalogsync.domain.diff.cart_discounts import resolve_cart_discount_value
from catalogsync.domain.diff.custom import resolve_custom
from catalogsync.domain.diff.prices import resolve_price
from catalogsync.domain.errors import DiffError
from catalogsync.domain.model import (
    Asset,
    AssetDraft,
    AssetSource,
    CartDiscount,
    CartDiscountDraft,
    CartDiscountTarget,
    CartDiscountValue,
    Category,
    CategoryDraft,
    CustomFields,
    CustomFieldsDraft,
    Dimensions,
    Image,
    InventoryEntry,
    InventoryEntryDraft,
    Money,
    Price,
    PriceDraft,
    Product,
    ProductDraft,
    ProductVariant,
    ProductVariantDraft,
    ReferenceKind,
)

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .schema import (
        AssetDraftPayload,
        AssetPayload,
        AssetSourcePayload,
        CartDiscountDraftPayload,
        CartDiscountPayload,
        CartDiscountTargetPayload,
        CartDiscountValueDraftPayload,
        CartDiscountValuePayload,
        CategoryDraftPayload,
        CategoryPayload,
        CustomFieldsDraftPayload,
        CustomFieldsPayload,
        DimensionsPayload,
        ImagePayload,
        InventoryEntryDraftPayload,
        InventoryEntryPayload,
        MoneyPayload,
        PriceDraftPayload,
        PricePayload,
        ProductDraftPayload,
        ProductPayload,
        VariantDraftPayload,
        VariantPayload,
    )

type JsonObject = dict[str, object]

# SetField name -> (platform action, payload attribute)
FIELD_ACTIONS: Mapping[str, tuple[str, str]] = {
    "name": ("changeName", "name"),
    "slug": ("changeSlug", "slug"),
    "description": ("setDescription", "description"),
    "meta_title": ("setMetaTitle", "metaTitle"),
    "meta_description": ("setMetaDescription", "metaDescription"),
    "meta_keywords": ("setMetaKeywords", "metaKeywords"),
    "tax_category": ("setTaxCategory", "taxCategory"),
    "parent": ("changeParent", "parent"),
    "order_hint": ("changeOrderHint", "orderHint"),
    "external_id": ("setExternalId", "externalId"),
    "is_active": ("changeIsActive", "isActive"),
    "sort_order": ("changeSortOrder", "sortOrder"),
    "requires_discount_code": ("changeRequiresDiscountCode", "requiresDiscountCode"),
    "valid_from": ("setValidFrom", "validFrom"),
    "valid_until": ("setValidUntil", "validUntil"),
    "stacking_mode": ("changeStackingMode", "stackingMode"),
    "restockable_in_days": ("setRestockableInDays", "restockableInDays"),
    "expected_delivery": ("setExpectedDelivery", "expectedDelivery"),
}
REFERENCE_FIELDS: Mapping[str, ReferenceKind] = {
    "tax_category": ReferenceKind.TAX_CATEGORY,
    "parent": ReferenceKind.CATEGORY,
}


# payload -> domain


def _dimensions(payload: DimensionsPayload | None) -> Dimensions | None:
    if payload is None:
        return None
    return Dimensions(width=payload.w, height=payload.h)


def _money(payload: MoneyPayload) -> Money:
    return Money(cent_amount=payload.cent_amount, currency=payload.currency_code)


def _image(payload: ImagePayload) -> Image:
    return Image(url=payload.url, dimensions=_dimensions(payload.dimensions), label=payload.label)


def _asset_source(payload: AssetSourcePayload) -> AssetSource:
    return AssetSource(
        uri=payload.uri,
        key=payload.key,
        content_type=payload.content_type,
        dimensions=_dimensions(payload.dimensions),
    )


def _custom(payload: CustomFieldsPayload | None) -> CustomFields | None:
    if payload is None:
        return None
    return CustomFields(type_id=payload.type.id, fields=dict(payload.fields))


def _asset(payload: AssetPayload) -> Asset:
    return Asset(
        id=payload.id,
        key=payload.key,
        name=payload.name,
        description=payload.description,
        tags=frozenset(payload.tags),
        sources=tuple(_asset_source(source) for source in payload.sources),
        custom=_custom(payload.custom),
    )


def _price(payload: PricePayload) -> Price:
    return Price(
        id=payload.id,
        value=_money(payload.value),
        country=payload.country,
        customer_group_id=payload.customer_group.id if payload.customer_group else None,
        channel_id=payload.channel.id if payload.channel else None,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        custom=_custom(payload.custom),
    )


def _variant(payload: VariantPayload) -> ProductVariant:
    return ProductVariant(
        id=payload.id,
        key=payload.key,
        sku=payload.sku,
        attributes={attribute.name: attribute.value for attribute in payload.attributes},
        prices=tuple(_price(price) for price in payload.prices),
        images=tuple(_image(image) for image in payload.images),
        assets=tuple(_asset(asset) for asset in payload.assets),
    )


def parse_product(payload: ProductPayload) -> Product:
    return Product(
        id=payload.id,
        version=payload.version,
        key=payload.key,
        product_type_id=payload.product_type.id,
        name=payload.name,
        slug=payload.slug,
        description=payload.description,
        meta_title=payload.meta_title,
        meta_description=payload.meta_description,
        meta_keywords=payload.meta_keywords,
        master_variant=_variant(payload.master_variant),
        variants=tuple(_variant(variant) for variant in payload.variants),
        category_ids=frozenset(category.id for category in payload.categories),
        tax_category_id=payload.tax_category.id if payload.tax_category else None,
    )


def parse_category(payload: CategoryPayload) -> Category:
    return Category(
        id=payload.id,
        version=payload.version,
        key=payload.key,
        name=payload.name,
        slug=payload.slug,
        description=payload.description,
        parent_id=payload.parent.id if payload.parent else None,
        order_hint=payload.order_hint,
        external_id=payload.external_id,
        meta_title=payload.meta_title,
        meta_description=payload.meta_description,
        meta_keywords=payload.meta_keywords,
        assets=tuple(_asset(asset) for asset in payload.assets),
        custom=_custom(payload.custom),
    )


def _cart_discount_value(payload: CartDiscountValuePayload) -> CartDiscountValue:
    return CartDiscountValue(
        type=payload.type,
        permyriad=payload.permyriad,
        money=tuple(_money(money) for money in payload.money),
        product=payload.product.id if payload.product else None,
        variant_id=payload.variant_id,
        supply_channel=payload.supply_channel.id if payload.supply_channel else None,
        distribution_channel=(
            payload.distribution_channel.id if payload.distribution_channel else None
        ),
    )


def _cart_discount_target(payload: CartDiscountTargetPayload | None) -> CartDiscountTarget | None:
    if payload is None:
        return None
    return CartDiscountTarget(type=payload.type, predicate=payload.predicate)


def parse_cart_discount(payload: CartDiscountPayload) -> CartDiscount:
    return CartDiscount(
        id=payload.id,
        version=payload.version,
        key=payload.key,
        name=payload.name,
        description=payload.description,
        value=_cart_discount_value(payload.value),
        cart_predicate=payload.cart_predicate,
        target=_cart_discount_target(payload.target),
        sort_order=payload.sort_order,
        is_active=payload.is_active,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        requires_discount_code=payload.requires_discount_code,
        stacking_mode=payload.stacking_mode,
        custom=_custom(payload.custom),
    )


def parse_inventory_entry(payload: InventoryEntryPayload) -> InventoryEntry:
    channel = payload.supply_channel
    return InventoryEntry(
        id=payload.id,
        version=payload.version,
        sku=payload.sku,
        quantity_on_stock=payload.quantity_on_stock,
        available_quantity=payload.available_quantity,
        supply_channel_id=channel.id if channel else None,
        supply_channel_key=channel.obj.key if channel and channel.obj else None,
        restockable_in_days=payload.restockable_in_days,
        expected_delivery=payload.expected_delivery,
        custom=_custom(payload.custom),
    )


# draft file -> domain


def _custom_draft(payload: CustomFieldsDraftPayload | None) -> CustomFieldsDraft | None:
    if payload is None:
        return None
    return CustomFieldsDraft(type=payload.type, fields=dict(payload.fields))


def _asset_draft(payload: AssetDraftPayload) -> AssetDraft:
    return AssetDraft(
        key=payload.key,
        name=payload.name,
        description=payload.description,
        tags=frozenset(payload.tags),
        sources=tuple(_asset_source(source) for source in payload.sources),
        custom=_custom_draft(payload.custom),
    )


def _price_draft(payload: PriceDraftPayload) -> PriceDraft:
    return PriceDraft(
        value=_money(payload.value),
        country=payload.country,
        customer_group=payload.customer_group,
        channel=payload.channel,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        custom=_custom_draft(payload.custom),
    )


def _variant_draft(payload: VariantDraftPayload) -> ProductVariantDraft:
    return ProductVariantDraft(
        key=payload.key,
        sku=payload.sku,
        attributes={attribute.name: attribute.value for attribute in payload.attributes},
        prices=tuple(_price_draft(price) for price in payload.prices),
        images=tuple(_image(image) for image in payload.images),
        assets=tuple(_asset_draft(asset) for asset in payload.assets),
    )


def product_draft_from_payload(payload: ProductDraftPayload) -> ProductDraft:
    return ProductDraft(
        key=payload.key,
        product_type=payload.product_type,
        name=payload.name,
        slug=payload.slug,
        description=payload.description,
        meta_title=payload.meta_title,
        meta_description=payload.meta_description,
        meta_keywords=payload.meta_keywords,
        master_variant=_variant_draft(payload.master_variant),
        variants=tuple(_variant_draft(variant) for variant in payload.variants),
        categories=frozenset(payload.categories),
        tax_category=payload.tax_category,
    )


def category_draft_from_payload(payload: CategoryDraftPayload) -> CategoryDraft:
    return CategoryDraft(
        key=payload.key,
        name=payload.name,
        slug=payload.slug,
        description=payload.description,
        parent=payload.parent,
        order_hint=payload.order_hint,
        external_id=payload.external_id,
        meta_title=payload.meta_title,
        meta_description=payload.meta_description,
        meta_keywords=payload.meta_keywords,
        assets=tuple(_asset_draft(asset) for asset in payload.assets),
        custom=_custom_draft(payload.custom),
    )


def _cart_discount_value_draft(payload: CartDiscountValueDraftPayload) -> CartDiscountValue:
    return CartDiscountValue(
        type=payload.type,
        permyriad=payload.permyriad,
        money=tuple(_money(money) for money in payload.money),
        product=payload.product,
        variant_id=payload.variant_id,
        supply_channel=payload.supply_channel,
        distribution_channel=payload.distribution_channel,
    )


def cart_discount_draft_from_payload(payload: CartDiscountDraftPayload) -> CartDiscountDraft:
    return CartDiscountDraft(
        key=payload.key,
        name=payload.name,
        description=payload.description,
        value=_cart_discount_value_draft(payload.value),
        cart_predicate=payload.cart_predicate,
        target=_cart_discount_target(payload.target),
        sort_order=payload.sort_order,
        is_active=payload.is_active,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        requires_discount_code=payload.requires_discount_code,
        stacking_mode=payload.stacking_mode,
        custom=_custom_draft(payload.custom),
    )


def inventory_entry_draft_from_payload(
    payload: InventoryEntryDraftPayload,
) -> InventoryEntryDraft:
    return InventoryEntryDraft(
        sku=payload.sku,
        quantity_on_stock=payload.quantity_on_stock,
        supply_channel=payload.supply_channel,
        restockable_in_days=payload.restockable_in_days,
        expected_delivery=payload.expected_delivery,
        custom=_custom_draft(payload.custom),
    )


# domain -> request bodies


def encode_value(value: object) -> object:
    """Encode plain values (datetimes, sets, mappings) as JSON-compatible data."""

    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, frozenset | set):
        return sorted(str(item) for item in value)
    if isinstance(value, Mapping):
        return {str(key): encode_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [encode_value(item) for item in value]
    return value


def _reference(kind: ReferenceKind, resource_id: str) -> JsonObject:
    return {"typeId": str(kind), "id": resource_id}


def _compact(body: JsonObject) -> JsonObject:
    return {name: value for name, value in body.items() if value is not None}


def _encode_money(money: Money) -> JsonObject:
    return {"centAmount": money.cent_amount, "currencyCode": money.currency}


def _encode_dimensions(dimensions: Dimensions | None) -> JsonObject | None:
    if dimensions is None:
        return None
    return {"w": dimensions.width, "h": dimensions.height}


def _encode_image(image: Image) -> JsonObject:
    return _compact(
        {"url": image.url, "dimensions": _encode_dimensions(image.dimensions), "label": image.label}
    )


def _encode_source(source: AssetSource) -> JsonObject:
    return _compact(
        {
            "uri": source.uri,
            "key": source.key,
            "contentType": source.content_type,
            "dimensions": _encode_dimensions(source.dimensions),
        }
    )


def _encode_custom(custom: CustomFieldsDraft | None) -> JsonObject | None:
    """Encode custom fields whose ``type`` already holds the resolved id."""

    if custom is None:
        return None
    return {
        "type": _reference(ReferenceKind.TYPE, custom.type),
        "fields": encode_value(custom.fields),
    }


def _encode_asset(asset: AssetDraft) -> JsonObject:
    return _compact(
        {
            "key": asset.key,
            "name": dict(asset.name),
            "description": encode_value(asset.description),
            "tags": sorted(asset.tags),
            "sources": [_encode_source(source) for source in asset.sources],
            "custom": _encode_custom(asset.custom),
        }
    )


def _encode_price(price: PriceDraft) -> JsonObject:
    """Encode a price whose references already hold platform ids."""

    return _compact(
        {
            "value": _encode_money(price.value),
            "country": price.country,
            "customerGroup": (
                _reference(ReferenceKind.CUSTOMER_GROUP, price.customer_group)
                if price.customer_group
                else None
            ),
            "channel": _reference(ReferenceKind.CHANNEL, price.channel) if price.channel else None,
            "validFrom": encode_value(price.valid_from),
            "validUntil": encode_value(price.valid_until),
            "custom": _encode_custom(price.custom),
        }
    )


def _encode_attributes(attributes: Mapping[str, object]) -> list[JsonObject]:
    return [{"name": name, "value": encode_value(value)} for name, value in attributes.items()]


def _encode_variant_draft(
    variant: ProductVariantDraft, references: ResolvedReferences
) -> JsonObject:
    return _compact(
        {
            "key": variant.key,
            "sku": variant.sku,
            "attributes": _encode_attributes(variant.attributes),
            "prices": [_encode_price(resolve_price(price, references)) for price in variant.prices],
            "images": [_encode_image(image) for image in variant.images],
            "assets": [
                _encode_asset(_resolve_asset(asset, references)) for asset in variant.assets
            ],
        }
    )


def _resolve_asset(asset: AssetDraft, references: ResolvedReferences) -> AssetDraft:
    return replace(asset, custom=resolve_custom(asset.custom, references))


def _localized_fields(draft: ProductDraft | CategoryDraft) -> JsonObject:
    return {
        "name": dict(draft.name),
        "slug": dict(draft.slug),
        "description": encode_value(draft.description),
        "metaTitle": encode_value(draft.meta_title),
        "metaDescription": encode_value(draft.meta_description),
        "metaKeywords": encode_value(draft.meta_keywords),
    }


def product_create_body(draft: ProductDraft, references: ResolvedReferences) -> JsonObject:
    tax_category = references.optional_id_for(ReferenceKind.TAX_CATEGORY, draft.tax_category)
    return _compact(
        {
            "key": draft.key,
            "productType": _reference(
                ReferenceKind.PRODUCT_TYPE,
                references.id_for(ReferenceKind.PRODUCT_TYPE, draft.product_type),
            ),
            **_localized_fields(draft),
            "masterVariant": _encode_variant_draft(draft.master_variant, references),
            "variants": [_encode_variant_draft(variant, references) for variant in draft.variants],
            "categories": [
                _reference(ReferenceKind.CATEGORY, references.id_for(ReferenceKind.CATEGORY, key))
                for key in sorted(draft.categories)
            ],
            "taxCategory": (
                _reference(ReferenceKind.TAX_CATEGORY, tax_category) if tax_category else None
            ),
            "publish": False,
        }
    )


def category_create_body(draft: CategoryDraft, references: ResolvedReferences) -> JsonObject:
    parent = references.optional_id_for(ReferenceKind.CATEGORY, draft.parent)
    return _compact(
        {
            "key": draft.key,
            **_localized_fields(draft),
            "parent": _reference(ReferenceKind.CATEGORY, parent) if parent else None,
            "orderHint": draft.order_hint,
            "externalId": draft.external_id,
            "assets": [_encode_asset(_resolve_asset(asset, references)) for asset in draft.assets],
            "custom": _encode_custom(resolve_custom(draft.custom, references)),
        }
    )


def _encode_cart_discount_value(value: CartDiscountValue) -> JsonObject:
    return _compact(
        {
            "type": str(value.type),
            "permyriad": value.permyriad,
            "money": [_encode_money(money) for money in value.money] or None,
            "product": _reference(ReferenceKind.PRODUCT, value.product) if value.product else None,
            "variantId": value.variant_id,
            "supplyChannel": (
                _reference(ReferenceKind.CHANNEL, value.supply_channel)
                if value.supply_channel
                else None
            ),
            "distributionChannel": (
                _reference(ReferenceKind.CHANNEL, value.distribution_channel)
                if value.distribution_channel
                else None
            ),
        }
    )


def _encode_cart_discount_target(target: CartDiscountTarget) -> JsonObject:
    return _compact({"type": str(target.type), "predicate": target.predicate})


def cart_discount_create_body(
    draft: CartDiscountDraft, references: ResolvedReferences
) -> JsonObject:
    return _compact(
        {
            "key": draft.key,
            "name": dict(draft.name),
            "description": encode_value(draft.description),
            "value": _encode_cart_discount_value(
                resolve_cart_discount_value(draft.value, references)
            ),
            "cartPredicate": draft.cart_predicate,
            "target": _encode_cart_discount_target(draft.target) if draft.target else None,
            "sortOrder": draft.sort_order,
            "isActive": draft.is_active,
            "validFrom": encode_value(draft.valid_from),
            "validUntil": encode_value(draft.valid_until),
            "requiresDiscountCode": draft.requires_discount_code,
            "stackingMode": str(draft.stacking_mode),
            "custom": _encode_custom(resolve_custom(draft.custom, references)),
        }
    )


def inventory_create_body(
    draft: InventoryEntryDraft, references: ResolvedReferences
) -> JsonObject:
    channel = references.optional_id_for(ReferenceKind.CHANNEL, draft.supply_channel)
    return _compact(
        {
            "sku": draft.sku,
            "quantityOnStock": draft.quantity_on_stock,
            "supplyChannel": _reference(ReferenceKind.CHANNEL, channel) if channel else None,
            "restockableInDays": draft.restockable_in_days,
            "expectedDelivery": encode_value(draft.expected_delivery),
            "custom": _encode_custom(resolve_custom(draft.custom, references)),
        }
    )


def _encode_set_field(action: SetField) -> JsonObject:
    try:
        name, attribute = FIELD_ACTIONS[action.field]
    except KeyError:
        raise DiffError(f"Unsupported field '{action.field}'") from None
    kind = REFERENCE_FIELDS.get(action.field)
    if kind is not None and isinstance(action.value, str):
        return {"action": name, attribute: _reference(kind, action.value)}
    return _compact({"action": name, attribute: encode_value(action.value)})


def _with_variant(body: JsonObject, variant_id: int | None) -> JsonObject:
    if variant_id is not None:
        body["variantId"] = variant_id
    return body


def _custom_type_body(name: str, type_id: str | None, fields: Mapping[str, object]) -> JsonObject:
    body: JsonObject = {"action": name}
    if type_id is not None:
        body["type"] = _reference(ReferenceKind.TYPE, type_id)
        body["fields"] = encode_value(fields)
    return body


def encode_action(action: UpdateAction) -> JsonObject:
    """Encode one update action as a platform action object."""

    match action:
        case SetField():
            return _encode_set_field(action)
        case AddToCategory(category_id=category_id):
            return {
                "action": "addToCategory",
                "category": _reference(ReferenceKind.CATEGORY, category_id),
            }
        case RemoveFromCategory(category_id=category_id):
            return {
                "action": "removeFromCategory",
                "category": _reference(ReferenceKind.CATEGORY, category_id),
            }
        case SetCustomType(type_id=type_id, fields=fields):
            return _custom_type_body("setCustomType", type_id, fields)
        case SetCustomField(name=name, value=value):
            return _compact(
                {"action": "setCustomField", "name": name, "value": encode_value(value)}
            )
        case ChangeValue(value=value):
            return {"action": "changeValue", "value": _encode_cart_discount_value(value)}
        case ChangeCartPredicate(cart_predicate=cart_predicate):
            return {"action": "changeCartPredicate", "cartPredicate": cart_predicate}
        case ChangeTarget(target=target):
            return {"action": "changeTarget", "target": _encode_cart_discount_target(target)}
        case ChangeQuantity(quantity=quantity):
            return {"action": "changeQuantity", "quantity": quantity}
        case AddVariant():
            return _compact(
                {
                    "action": "addVariant",
                    "key": action.key,
                    "sku": action.sku,
                    "attributes": _encode_attributes(action.attributes),
                    "prices": [_encode_price(price) for price in action.prices],
                    "images": [_encode_image(image) for image in action.images],
                    "assets": [_encode_asset(asset) for asset in action.assets],
                }
            )
        case RemoveVariant(variant_id=variant_id):
            return {"action": "removeVariant", "id": variant_id}
        case ChangeMasterVariant(variant_id=variant_id, sku=sku):
            if sku is not None:
                return {"action": "changeMasterVariant", "sku": sku}
            return {"action": "changeMasterVariant", "variantId": variant_id}
        case SetSku(variant_id=variant_id, sku=sku):
            return _compact({"action": "setSku", "variantId": variant_id, "sku": sku})
        case SetAttribute(variant_id=variant_id, name=name, value=value):
            return _compact(
                {
                    "action": "setAttribute",
                    "variantId": variant_id,
                    "name": name,
                    "value": encode_value(value),
                }
            )
        case AddPrice(variant_id=variant_id, price=price):
            return {"action": "addPrice", "variantId": variant_id, "price": _encode_price(price)}
        case RemovePrice(price_id=price_id):
            return {"action": "removePrice", "priceId": price_id}
        case ChangePrice(price_id=price_id, price=price):
            return {"action": "changePrice", "priceId": price_id, "price": _encode_price(price)}
        case SetProductPriceCustomType(price_id=price_id, type_id=type_id, fields=fields):
            body = _custom_type_body("setProductPriceCustomType", type_id, fields)
            body["priceId"] = price_id
            return body
        case SetProductPriceCustomField(price_id=price_id, name=name, value=value):
            return _compact(
                {
                    "action": "setProductPriceCustomField",
                    "priceId": price_id,
                    "name": name,
                    "value": encode_value(value),
                }
            )
        case AddExternalImage(variant_id=variant_id, image=image):
            return {
                "action": "addExternalImage",
                "variantId": variant_id,
                "image": _encode_image(image),
            }
        case RemoveImage(variant_id=variant_id, image_url=image_url):
            return {"action": "removeImage", "variantId": variant_id, "imageUrl": image_url}
        case MoveImageToPosition(variant_id=variant_id, image_url=image_url, position=position):
            return {
                "action": "moveImageToPosition",
                "variantId": variant_id,
                "imageUrl": image_url,
                "position": position,
            }
        case AddAsset(asset=asset, position=position, variant_id=variant_id):
            body = _compact(
                {"action": "addAsset", "asset": _encode_asset(asset), "position": position}
            )
            return _with_variant(body, variant_id)
        case RemoveAsset(asset_key=asset_key, variant_id=variant_id):
            return _with_variant({"action": "removeAsset", "assetKey": asset_key}, variant_id)
        case ChangeAssetOrder(asset_order=asset_order, variant_id=variant_id):
            return _with_variant(
                {"action": "changeAssetOrder", "assetOrder": list(asset_order)}, variant_id
            )
        case ChangeAssetName(asset_key=asset_key, name=name, variant_id=variant_id):
            return _with_variant(
                {"action": "changeAssetName", "assetKey": asset_key, "name": dict(name)}, variant_id
            )
        case SetAssetDescription(
            asset_key=asset_key, description=description, variant_id=variant_id
        ):
            body = _compact(
                {
                    "action": "setAssetDescription",
                    "assetKey": asset_key,
                    "description": encode_value(description),
                }
            )
            return _with_variant(body, variant_id)
        case SetAssetTags(asset_key=asset_key, tags=tags, variant_id=variant_id):
            return _with_variant(
                {"action": "setAssetTags", "assetKey": asset_key, "tags": sorted(tags)}, variant_id
            )
        case SetAssetSources(asset_key=asset_key, sources=sources, variant_id=variant_id):
            return _with_variant(
                {
                    "action": "setAssetSources",
                    "assetKey": asset_key,
                    "sources": [_encode_source(source) for source in sources],
                },
                variant_id,
            )
        case SetAssetCustomType(
            asset_key=asset_key, type_id=type_id, fields=fields, variant_id=variant_id
        ):
            body = _custom_type_body("setAssetCustomType", type_id, fields)
            body["assetKey"] = asset_key
            return _with_variant(body, variant_id)
        case SetAssetCustomField(
            asset_key=asset_key, name=name, value=value, variant_id=variant_id
        ):
            body = _compact(
                {
                    "action": "setAssetCustomField",
                    "assetKey": asset_key,
                    "name": name,
                    "value": encode_value(value),
                }
            )
            return _with_variant(body, variant_id)
        case _:
            assert_never(action)
