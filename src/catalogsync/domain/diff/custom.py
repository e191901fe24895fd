"""Custom type and custom field diffing shared by resources, prices and assets."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Protocol

from catalogsync.domain.model import ReferenceKind

if TYPE_CHECKING:
    from catalogsync.domain.model import CustomFields, CustomFieldsDraft, FieldMap
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions


class SetTypeFactory[TAction](Protocol):
    def __call__(self, type_id: str | None, fields: FieldMap) -> TAction: ...


class SetFieldFactory[TAction](Protocol):
    def __call__(self, name: str, value: object | None) -> TAction: ...


def build_custom_actions[TAction](
    existing: CustomFields | None,
    draft: CustomFieldsDraft | None,
    references: ResolvedReferences,
    options: DiffOptions,
    *,
    set_type: SetTypeFactory[TAction],
    set_field: SetFieldFactory[TAction],
) -> list[TAction]:
    """Diff custom fields of one owner.

    A different type replaces type and fields in one action; the same type is
    diffed field by field; a draft without custom fields removes them.
    """

    if draft is None:
        if existing is None:
            return []
        return [set_type(None, {})]

    type_id = references.id_for(ReferenceKind.TYPE, draft.type)
    if existing is None or existing.type_id != type_id:
        return [set_type(type_id, dict(draft.fields))]

    actions: list[TAction] = []
    for name, value in draft.fields.items():
        if existing.fields.get(name) != value:
            actions.append(set_field(name, value))
    if options.remove_other_properties:
        actions.extend(
            set_field(name, None)
            for name, value in existing.fields.items()
            if name not in draft.fields and value is not None
        )
    return actions


def resolve_custom(
    draft: CustomFieldsDraft | None,
    references: ResolvedReferences,
) -> CustomFieldsDraft | None:
    """Copy of ``draft`` whose ``type`` holds the resolved type id."""

    if draft is None:
        return None
    return replace(draft, type=references.id_for(ReferenceKind.TYPE, draft.type))
