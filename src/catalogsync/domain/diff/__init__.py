"""Diff builders: compare one existing resource with its draft.

Builders are pure; they return unordered actions and raise ``DiffError``
only when a reference cannot be mapped to a platform id.
"""

from __future__ import annotations

from .cart_discounts import build_cart_discount_actions
from .categories import build_category_actions
from .inventories import build_inventory_actions
from .policy import DiffOptions
from .products import build_product_actions, product_type_warning

__all__ = [
    "DiffOptions",
    "build_cart_discount_actions",
    "build_category_actions",
    "build_inventory_actions",
    "build_product_actions",
    "product_type_warning",
]
