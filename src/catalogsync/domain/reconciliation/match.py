"""Validate drafts and classify them against the platform state of a batch."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.domain.errors import ValidationError
from catalogsync.domain.model import ProductDraft

from .contracts import MatchedDraft, NewDraft, UnresolvableDraft

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from catalogsync.domain.model import Draft, ReferenceKey

    from .contracts import DraftMatch
    from .references import ResolvedReferences

log = getLogger(__name__)


def validate_drafts[TDraft: Draft](
    drafts: Iterable[TDraft],
) -> tuple[list[TDraft], list[ValidationError]]:
    """Split the input into drafts that can be synced and structural failures.

    A draft is rejected when its key is missing or blank, when an earlier draft
    already used the same key, or (for products) when one of its variants has
    no key or two variants share one. The first occurrence of a key wins.
    """

    valid: list[TDraft] = []
    errors: list[ValidationError] = []
    seen: set[str] = set()
    for draft in drafts:
        key = draft.key
        if key is None or not key.strip():
            errors.append(ValidationError("Draft is missing a key"))
            continue
        if key in seen:
            errors.append(ValidationError(f"Duplicate draft key '{key}' in input", key=key))
            continue
        seen.add(key)
        if isinstance(draft, ProductDraft) and (problem := _variant_key_problem(draft)):
            errors.append(ValidationError(problem, key=key))
            continue
        valid.append(draft)
    return valid, errors


def _variant_key_problem(draft: ProductDraft) -> str | None:
    variant_keys: set[str] = set()
    for position, variant in enumerate(draft.all_variants):
        if variant.key is None or not variant.key.strip():
            return f"Variant at position {position} of product '{draft.key}' has no key"
        if variant.key in variant_keys:
            return f"Variant key '{variant.key}' appears twice in product '{draft.key}'"
        variant_keys.add(variant.key)
    return None


def match_drafts[TDraft: Draft, TResource](
    drafts: Sequence[TDraft],
    existing_by_key: Mapping[str, TResource],
    references: ResolvedReferences,
    *,
    auto_create: bool = False,
) -> list[DraftMatch[TDraft, TResource]]:
    """Classify every draft of a batch as new, matched or unresolvable.

    Drafts are expected to have passed :func:`validate_drafts`. Keys are
    compared by exact string equality. Missing references of auto-creatable
    kinds do not block a draft when ``auto_create`` is set.
    """

    results: list[DraftMatch[TDraft, TResource]] = []
    for draft in drafts:
        missing = _blocking_references(draft.reference_keys(), references, auto_create=auto_create)
        if missing:
            log.debug("Draft %s has unresolved references %s", draft.key, missing)
            results.append(UnresolvableDraft(draft=draft, missing=missing))
            continue
        existing = existing_by_key.get(draft.key) if draft.key is not None else None
        if existing is None:
            results.append(NewDraft(draft=draft))
        else:
            results.append(MatchedDraft(draft=draft, resource=existing))
    return results


def _blocking_references(
    keys: Iterable[ReferenceKey],
    references: ResolvedReferences,
    *,
    auto_create: bool,
) -> tuple[ReferenceKey, ...]:
    return tuple(
        reference
        for reference in references.missing(keys)
        if not (auto_create and reference.kind.auto_creatable)
    )
