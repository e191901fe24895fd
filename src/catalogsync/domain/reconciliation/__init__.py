"""Matching, reference snapshots and action ordering."""

from __future__ import annotations

from .contracts import DraftMatch, MatchedDraft, MatchStatus, NewDraft, UnresolvableDraft
from .match import match_drafts, validate_drafts
from .order import (
    order_cart_discount_actions,
    order_category_actions,
    order_inventory_actions,
    order_product_actions,
)
from .references import ResolvedReferences

__all__ = [
    "DraftMatch",
    "MatchStatus",
    "MatchedDraft",
    "NewDraft",
    "ResolvedReferences",
    "UnresolvableDraft",
    "match_drafts",
    "order_cart_discount_actions",
    "order_category_actions",
    "order_inventory_actions",
    "order_product_actions",
    "validate_drafts",
]
