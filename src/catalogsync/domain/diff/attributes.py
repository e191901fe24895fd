"""Variant attribute diffing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import SetAttribute

if TYPE_CHECKING:
    from catalogsync.domain.model import FieldMap

    from .policy import DiffOptions


def build_attribute_actions(
    variant_id: int,
    existing: FieldMap,
    draft: FieldMap,
    options: DiffOptions,
) -> list[SetAttribute]:
    """One ``SetAttribute`` per changed attribute; ``value=None`` unsets.

    Each attribute name yields at most one action, so a set and an unset of
    the same attribute never meet in one diff.
    """

    actions: list[SetAttribute] = []
    for name, value in draft.items():
        if existing.get(name) != value:
            actions.append(SetAttribute(variant_id=variant_id, name=name, value=value))
    if options.remove_other_properties:
        actions.extend(
            SetAttribute(variant_id=variant_id, name=name)
            for name, value in existing.items()
            if name not in draft and value is not None
        )
    return actions
