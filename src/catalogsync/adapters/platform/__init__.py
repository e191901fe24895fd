"""Public interface for the catalog platform adapter."""

from __future__ import annotations

from .client import PlatformClient
from .drafts import (
    DraftFileError,
    load_cart_discount_drafts,
    load_category_drafts,
    load_inventory_drafts,
    load_product_drafts,
)
from .gateway import (
    PlatformReferenceResolver,
    PlatformResourceGateway,
    cart_discount_gateway,
    category_gateway,
    inventory_gateway,
    product_gateway,
)
from .schema import (
    CartDiscountDraftPayload,
    CategoryDraftPayload,
    InventoryEntryDraftPayload,
    ProductDraftPayload,
)
from .translator import (
    cart_discount_draft_from_payload,
    category_draft_from_payload,
    encode_action,
    inventory_entry_draft_from_payload,
    product_draft_from_payload,
)

__all__ = [
    "CartDiscountDraftPayload",
    "CategoryDraftPayload",
    "DraftFileError",
    "InventoryEntryDraftPayload",
    "PlatformClient",
    "PlatformReferenceResolver",
    "PlatformResourceGateway",
    "ProductDraftPayload",
    "cart_discount_draft_from_payload",
    "cart_discount_gateway",
    "category_draft_from_payload",
    "category_gateway",
    "encode_action",
    "inventory_entry_draft_from_payload",
    "inventory_gateway",
    "load_cart_discount_drafts",
    "load_category_drafts",
    "load_inventory_drafts",
    "load_product_drafts",
    "product_draft_from_payload",
    "product_gateway",
]
