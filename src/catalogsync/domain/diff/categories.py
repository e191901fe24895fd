"""Category diffing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import SetCustomField, SetCustomType
from catalogsync.domain.model import ReferenceKind

from .assets import build_asset_actions
from .custom import build_custom_actions
from .fields import build_localized_field, build_set_field

if TYPE_CHECKING:
    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import Category, CategoryDraft
    from catalogsync.domain.reconciliation.references import ResolvedReferences

    from .policy import DiffOptions

LOCALIZED_FIELDS = (
    "name",
    "slug",
    "description",
    "meta_title",
    "meta_description",
    "meta_keywords",
)


def build_category_actions(
    existing: Category,
    draft: CategoryDraft,
    references: ResolvedReferences,
    options: DiffOptions,
) -> list[UpdateAction]:
    actions: list[UpdateAction] = []
    for field in LOCALIZED_FIELDS:
        actions.extend(
            build_localized_field(field, getattr(existing, field), getattr(draft, field), options)
        )

    parent_id = references.optional_id_for(ReferenceKind.CATEGORY, draft.parent)
    actions.extend(build_set_field("parent", existing.parent_id, parent_id, options))
    actions.extend(build_set_field("order_hint", existing.order_hint, draft.order_hint, options))
    actions.extend(build_set_field("external_id", existing.external_id, draft.external_id, options))

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
    actions.extend(build_asset_actions(existing.assets, draft.assets, references, options))
    return actions
