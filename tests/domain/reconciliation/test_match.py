from __future__ import annotations

from dataclasses import replace

from catalogsync.domain.model import PriceDraft, ReferenceKey, ReferenceKind
from catalogsync.domain.reconciliation import (
    MatchedDraft,
    MatchStatus,
    NewDraft,
    UnresolvableDraft,
    match_drafts,
    validate_drafts,
)

from tests.helpers.catalog import (
    eur,
    make_cart_discount,
    make_cart_discount_draft,
    make_product_draft,
    make_references,
    make_variant_draft,
    product_references,
)


def test_validate_drafts_rejects_missing_and_blank_keys() -> None:
    drafts = [
        make_cart_discount_draft(key=None),
        make_cart_discount_draft(key="  "),
        make_cart_discount_draft("ok"),
    ]

    valid, errors = validate_drafts(drafts)

    assert [draft.key for draft in valid] == ["ok"]
    assert [error.message for error in errors] == ["Draft is missing a key"] * 2


def test_validate_drafts_keeps_first_of_duplicate_keys() -> None:
    first = make_cart_discount_draft("dup", sort_order="0.1")
    second = make_cart_discount_draft("dup", sort_order="0.2")

    valid, errors = validate_drafts([first, second])

    assert valid == [first]
    assert len(errors) == 1
    assert errors[0].key == "dup"
    assert errors[0].message == "Duplicate draft key 'dup' in input"


def test_validate_drafts_checks_product_variant_keys() -> None:
    keyless = make_product_draft("a", variants=(replace(make_variant_draft("v2"), key=None),))
    twice = make_product_draft("b", variants=(make_variant_draft("v1"),))

    valid, errors = validate_drafts([keyless, twice])

    assert valid == []
    assert [error.message for error in errors] == [
        "Variant at position 1 of product 'a' has no key",
        "Variant key 'v1' appears twice in product 'b'",
    ]


def test_match_drafts_classifies_new_and_matched() -> None:
    existing = make_cart_discount("old")
    drafts = [make_cart_discount_draft("old"), make_cart_discount_draft("fresh")]

    matches = match_drafts(drafts, {"old": existing}, make_references())

    assert matches == [
        MatchedDraft(draft=drafts[0], resource=existing),
        NewDraft(draft=drafts[1]),
    ]
    assert [match.status for match in matches] == [MatchStatus.MATCHED, MatchStatus.NEW]


def test_match_drafts_marks_missing_references_unresolvable() -> None:
    draft = make_product_draft("shirt", categories=frozenset({"missing"}))

    (match,) = match_drafts([draft], {}, product_references())

    assert isinstance(match, UnresolvableDraft)
    assert match.missing == (ReferenceKey(ReferenceKind.CATEGORY, "missing"),)


def test_match_drafts_compares_keys_exactly() -> None:
    existing = make_cart_discount("Summer")

    (match,) = match_drafts(
        [make_cart_discount_draft("summer")], {"Summer": existing}, make_references()
    )

    assert isinstance(match, NewDraft)


def test_missing_channels_do_not_block_when_auto_created() -> None:
    price = PriceDraft(value=eur(100), channel="store-1")
    draft = make_product_draft(master_variant=make_variant_draft("v1", prices=(price,)))

    blocked = match_drafts([draft], {}, product_references())
    allowed = match_drafts([draft], {}, product_references(), auto_create=True)

    assert isinstance(blocked[0], UnresolvableDraft)
    assert isinstance(allowed[0], NewDraft)
