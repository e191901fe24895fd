"""Cart discount diffing.

Actions come out in a fixed order: value, cart predicate, target, active
flag, name, description, sort order, discount code requirement, validity
and stacking mode, then custom fields.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogsync.domain.actions import (
    ChangeCartPredicate,
    ChangeTarget,
    ChangeValue,
    SetCustomField,
    SetCustomType,
    SetField,
)
from catalogsync.domain.model import ReferenceKind

from .custom import build_custom_actions
from .fields import build_localized_field, build_set_field

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import CartDiscount, CartDiscountDraft, CartDiscountValue
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


def build_cart_discount_actions(
    existing: CartDiscount,
    draft: CartDiscountDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    actions: list[UpdateAction] = []
    value = resolve_cart_discount_value(draft.value, references)
    if value != existing.value:
        actions.append(ChangeValue(value=value))
    if draft.cart_predicate != existing.cart_predicate:
        actions.append(ChangeCartPredicate(cart_predicate=draft.cart_predicate))
    if draft.target is not None and draft.target != existing.target:
        actions.append(ChangeTarget(target=draft.target))
    if draft.is_active != existing.is_active:
        actions.append(SetField(field="is_active", value=draft.is_active))
    actions.extend(build_localized_field("name", existing.name, draft.name, options))
    actions.extend(
        build_localized_field("description", existing.description, draft.description, options)
    )
    if draft.sort_order != existing.sort_order:
        actions.append(SetField(field="sort_order", value=draft.sort_order))
    if draft.requires_discount_code != existing.requires_discount_code:
        actions.append(
            SetField(field="requires_discount_code", value=draft.requires_discount_code)
        )
    actions.extend(build_set_field("valid_from", existing.valid_from, draft.valid_from, options))
    actions.extend(
        build_set_field("valid_until", existing.valid_until, draft.valid_until, options)
    )
    if draft.stacking_mode != existing.stacking_mode:
        actions.append(SetField(field="stacking_mode", value=draft.stacking_mode))
    actions.extend(
        build_custom_actions(
            existing.custom,
            draft.custom,
            references,
            options,
            set_type=lambda type_id, fields: SetCustomType(type_id=type_id, fields=fields),
            set_field=lambda name, value: SetCustomField(name=name, value=value),
        )
    )
    return actions


def resolve_cart_discount_value(
    value: CartDiscountValue, references: ResolvedReferences
) -> CartDiscountValue:
    """Copy of ``value`` whose gift line item references hold platform ids."""

    if not value.reference_keys():
        return value
    return replace(
        value,
        product=references.optional_id_for(ReferenceKind.PRODUCT, value.product),
        supply_channel=references.optional_id_for(ReferenceKind.CHANNEL, value.supply_channel),
        distribution_channel=references.optional_id_for(
            ReferenceKind.CHANNEL, value.distribution_channel
        ),
    )
