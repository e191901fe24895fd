"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class ReferenceKind(StrEnum):
    """Kinds of resources a draft may point to by key."""

    PRODUCT = "product"
    PRODUCT_TYPE = "product-type"
    CATEGORY = "category"
    TAX_CATEGORY = "tax-category"
    CHANNEL = "channel"
    CUSTOMER_GROUP = "customer-group"
    TYPE = "type"

    @property
    def auto_creatable(self) -> bool:
        return self is ReferenceKind.CHANNEL


class CartDiscountValueType(StrEnum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    GIFT_LINE_ITEM = "giftLineItem"


class CartDiscountTargetType(StrEnum):
    LINE_ITEMS = "lineItems"
    CUSTOM_LINE_ITEMS = "customLineItems"
    SHIPPING = "shipping"


class StackingMode(StrEnum):
    STACKING = "Stacking"
    STOP_AFTER_THIS_DISCOUNT = "StopAfterThisDiscount"
