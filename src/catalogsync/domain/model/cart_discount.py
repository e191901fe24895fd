"""Cart discounts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import CustomFields, CustomFieldsDraft, LocalizedString, Money, ReferenceKey
from .enums import CartDiscountTargetType, CartDiscountValueType, ReferenceKind, StackingMode

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(slots=True, frozen=True, kw_only=True)
class CartDiscountValue:
    """How much a cart discount takes off, or which line item it gives away.

    Gift line items name a product variant and optional supply and
    distribution channels. Drafts hold their keys; existing resources and
    resolved values hold ids. Money amounts are kept sorted by currency, so
    two values with the same amounts compare equal whatever their order.
    """

    type: CartDiscountValueType
    permyriad: int | None = None
    money: tuple[Money, ...] = ()
    product: str | None = None
    variant_id: int | None = None
    supply_channel: str | None = None
    distribution_channel: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "money", tuple(sorted(self.money, key=lambda money: money.currency))
        )
        match self.type:
            case CartDiscountValueType.RELATIVE:
                if self.permyriad is None:
                    raise ValueError("Relative cart discount values require a permyriad")
            case CartDiscountValueType.GIFT_LINE_ITEM:
                if self.product is None or self.variant_id is None:
                    raise ValueError("Gift line item values require a product and a variant id")
            case _:
                if not self.money:
                    raise ValueError(
                        f"{self.type} cart discount values require at least one money amount"
                    )

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        keys: list[ReferenceKey] = []
        if self.product is not None:
            keys.append(ReferenceKey(ReferenceKind.PRODUCT, self.product))
        for channel in (self.supply_channel, self.distribution_channel):
            if channel is not None:
                keys.append(ReferenceKey(ReferenceKind.CHANNEL, channel))
        return tuple(keys)


@dataclass(slots=True, frozen=True, kw_only=True)
class CartDiscountTarget:
    type: CartDiscountTargetType
    predicate: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class CartDiscountDraft:
    key: str | None
    name: LocalizedString
    cart_predicate: str
    value: CartDiscountValue
    sort_order: str
    target: CartDiscountTarget | None = None
    description: LocalizedString | None = None
    is_active: bool = True
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    requires_discount_code: bool = False
    stacking_mode: StackingMode = StackingMode.STACKING
    custom: CustomFieldsDraft | None = None

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        custom = self.custom.reference_keys() if self.custom is not None else ()
        return (*self.value.reference_keys(), *custom)


@dataclass(slots=True, frozen=True, kw_only=True)
class CartDiscount:
    id: str
    version: int
    key: str | None
    name: LocalizedString
    cart_predicate: str
    value: CartDiscountValue
    sort_order: str
    target: CartDiscountTarget | None = None
    description: LocalizedString | None = None
    is_active: bool = True
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    requires_discount_code: bool = False
    stacking_mode: StackingMode = StackingMode.STACKING
    custom: CustomFields | None = None
