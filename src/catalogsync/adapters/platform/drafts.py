"""Read draft files: JSON arrays of drafts in the platform's draft format."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import BaseModel, TypeAdapter

from .schema import (
    CartDiscountDraftPayload,
    CategoryDraftPayload,
    InventoryEntryDraftPayload,
    ProductDraftPayload,
)
from .translator import (
    cart_discount_draft_from_payload,
    category_draft_from_payload,
    inventory_entry_draft_from_payload,
    product_draft_from_payload,
)

if TYPE_CHECKING:
    from pathlib import Path

    from catalogsync.domain.model import (
        CartDiscountDraft,
        CategoryDraft,
        InventoryEntryDraft,
        ProductDraft,
    )


class DraftFileError(ValueError):
    """Raised when a draft file cannot be read or does not hold valid drafts."""


def _read_payloads[TModel: BaseModel](path: Path, model: type[TModel]) -> list[TModel]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DraftFileError(f"Cannot read draft file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DraftFileError(f"Draft file {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise DraftFileError(f"Draft file {path} must contain a JSON array")
    try:
        return TypeAdapter(list[model]).validate_python(raw)
    except ValueError as exc:
        raise DraftFileError(f"Draft file {path} holds invalid drafts: {exc}") from exc


def load_product_drafts(path: Path) -> list[ProductDraft]:
    return [
        product_draft_from_payload(payload)
        for payload in _read_payloads(path, ProductDraftPayload)
    ]


def load_category_drafts(path: Path) -> list[CategoryDraft]:
    return [
        category_draft_from_payload(payload)
        for payload in _read_payloads(path, CategoryDraftPayload)
    ]


def load_cart_discount_drafts(path: Path) -> list[CartDiscountDraft]:
    payloads = _read_payloads(path, CartDiscountDraftPayload)
    try:
        return [cart_discount_draft_from_payload(payload) for payload in payloads]
    except ValueError as exc:
        raise DraftFileError(f"Draft file {path} holds invalid cart discounts: {exc}") from exc


def load_inventory_drafts(path: Path) -> list[InventoryEntryDraft]:
    return [
        inventory_entry_draft_from_payload(payload)
        for payload in _read_payloads(path, InventoryEntryDraftPayload)
    ]
