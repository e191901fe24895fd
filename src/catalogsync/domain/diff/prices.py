"""Variant price diffing; prices are matched by scope."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from catalogsync.domain.actions import (
    AddPrice,
    ChangePrice,
    RemovePrice,
    SetProductPriceCustomField,
    SetProductPriceCustomType,
)
from catalogsync.domain.model import ReferenceKind

from .custom import build_custom_actions, resolve_custom

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalogsync.domain.actions import PriceAction
    from catalogsync.domain.model import Price, PriceDraft, PriceScope
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


def resolve_price(price: PriceDraft, references: ResolvedReferences) -> PriceDraft:
    """Copy of ``price`` whose references hold platform ids instead of keys."""

    return replace(
        price,
        customer_group=references.optional_id_for(
            ReferenceKind.CUSTOMER_GROUP, price.customer_group
        ),
        channel=references.optional_id_for(ReferenceKind.CHANNEL, price.channel),
        custom=resolve_custom(price.custom, references),
    )


def price_scope(price: PriceDraft) -> PriceScope:
    """Scope of a resolved price draft, comparable to ``Price.scope``."""

    return (
        price.value.currency,
        price.country,
        price.customer_group,
        price.channel,
        price.valid_from,
        price.valid_until,
    )


def build_price_actions(
    variant_id: int,
    existing: Sequence[Price],
    draft: Sequence[PriceDraft],
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[PriceAction]:
    """Diff the prices of one variant.

    Existing prices without a draft of the same scope are removed only when
    ``remove_other_collection_entries`` is set. Two existing prices sharing a
    scope are matched first come, first served.
    """

    unmatched: dict[PriceScope, Price] = {}
    for price in existing:
        unmatched.setdefault(price.scope, price)

    matched: list[tuple[Price, PriceDraft, PriceDraft]] = []
    added: list[PriceDraft] = []
    for price_draft in draft:
        resolved = resolve_price(price_draft, references)
        current = unmatched.pop(price_scope(resolved), None)
        if current is None:
            added.append(resolved)
        else:
            matched.append((current, price_draft, resolved))

    actions: list[PriceAction] = []
    if options.remove_other_collection_entries:
        kept = {current.id for current, _, _ in matched}
        actions.extend(RemovePrice(price_id=price.id) for price in existing if price.id not in kept)
    for current, price_draft, resolved in matched:
        if current.value != resolved.value:
            actions.append(ChangePrice(price_id=current.id, price=resolved))
        actions.extend(
            build_custom_actions(
                current.custom,
                price_draft.custom,
                references,
                options,
                set_type=lambda type_id, fields, price_id=current.id: SetProductPriceCustomType(
                    price_id=price_id, type_id=type_id, fields=fields
                ),
                set_field=lambda name, value, price_id=current.id: SetProductPriceCustomField(
                    price_id=price_id, name=name, value=value
                ),
            )
        )
    actions.extend(AddPrice(variant_id=variant_id, price=price) for price in added)
    return actions
