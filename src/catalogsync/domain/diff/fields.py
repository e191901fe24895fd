"""Comparison rules for scalar, localized and set-valued fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.actions import SetField

if TYPE_CHECKING:
    from catalogsync.domain.model import LocalizedString

    from .policy import DiffOptions


def build_set_field(
    field: str,
    existing: object | None,
    draft: object | None,
    options: DiffOptions,
) -> list[SetField]:
    """Set ``field`` when the draft value differs; unset omitted values if allowed."""

    if draft is None:
        if existing is not None and options.remove_other_properties:
            return [SetField(field=field)]
        return []
    if draft != existing:
        return [SetField(field=field, value=draft)]
    return []


def desired_localized(
    existing: LocalizedString | None,
    draft: LocalizedString,
    options: DiffOptions,
) -> dict[str, str]:
    """Localized value after applying ``draft``; existing-only locales survive by default."""

    if options.remove_other_locales or existing is None:
        return dict(draft)
    return {**existing, **draft}


def build_localized_field(
    field: str,
    existing: LocalizedString | None,
    draft: LocalizedString | None,
    options: DiffOptions,
) -> list[SetField]:
    if draft is None:
        return build_set_field(field, existing or None, None, options)
    desired = desired_localized(existing, draft, options)
    if desired == dict(existing or {}):
        return []
    return [SetField(field=field, value=desired)]


def desired_entries(
    existing: frozenset[str],
    draft: frozenset[str],
    options: DiffOptions,
) -> frozenset[str]:
    if options.remove_other_set_entries:
        return draft
    return draft | existing


def diff_entries(
    existing: frozenset[str],
    draft: frozenset[str],
    options: DiffOptions,
) -> tuple[list[str], list[str]]:
    """Return ``(added, removed)`` entries, each sorted for a stable action order."""

    desired = desired_entries(existing, draft, options)
    return sorted(desired - existing), sorted(existing - desired)
