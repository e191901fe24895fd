"""Inventory entry diffing.

The supply channel is part of an entry's identity and never changes here;
an entry for another channel is a different entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import ChangeQuantity, SetCustomField, SetCustomType

from .custom import build_custom_actions
from .fields import build_set_field

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import InventoryEntry, InventoryEntryDraft
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


def build_inventory_actions(
    existing: InventoryEntry,
    draft: InventoryEntryDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    actions: list[UpdateAction] = []
    if draft.quantity_on_stock != existing.quantity_on_stock:
        actions.append(ChangeQuantity(quantity=draft.quantity_on_stock))
    actions.extend(
        build_set_field(
            "restockable_in_days", existing.restockable_in_days, draft.restockable_in_days, options
        )
    )
    actions.extend(
        build_set_field(
            "expected_delivery", existing.expected_delivery, draft.expected_delivery, options
        )
    )
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
