from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from catalogsync.adapters.platform import (
    DraftFileError,
    load_cart_discount_drafts,
    load_category_drafts,
    load_inventory_drafts,
    load_product_drafts,
)
from catalogsync.domain.model import CartDiscountTargetType, StackingMode

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_product_drafts(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "products.json",
        [
            {
                "key": "shirt",
                "productType": "apparel",
                "name": {"en": "Shirt", "de": "Hemd"},
                "slug": {"en": "shirt"},
                "masterVariant": {"key": "v1", "sku": "sku-v1"},
                "variants": [{"key": "v2", "sku": "sku-v2"}],
                "taxCategory": "standard",
            }
        ],
    )

    (draft,) = load_product_drafts(path)

    assert draft.key == "shirt"
    assert draft.name == {"en": "Shirt", "de": "Hemd"}
    assert [variant.key for variant in draft.variants] == ["v2"]
    assert draft.tax_category == "standard"


def test_load_category_drafts(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "categories.json",
        [
            {"key": "tops", "name": {"en": "Tops"}, "slug": {"en": "tops"}},
            {
                "key": "shirts",
                "name": {"en": "Shirts"},
                "slug": {"en": "shirts"},
                "parent": "tops",
                "orderHint": "0.5",
                "custom": {"type": "category-fields", "fields": {"featured": True}},
            },
        ],
    )

    tops, shirts = load_category_drafts(path)

    assert tops.parent is None
    assert shirts.parent == "tops"
    assert shirts.order_hint == "0.5"
    assert shirts.custom is not None
    assert shirts.custom.type == "category-fields"
    assert shirts.custom.fields == {"featured": True}


def test_load_cart_discount_drafts(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "discounts.json",
        [
            {
                "key": "summer",
                "name": {"en": "Summer sale"},
                "value": {"type": "relative", "permyriad": 1000},
                "cartPredicate": "1 = 1",
                "target": {"type": "lineItems", "predicate": "1 = 1"},
                "sortOrder": "0.1",
                "stackingMode": "StopAfterThisDiscount",
                "validFrom": "2026-06-01T00:00:00Z",
            }
        ],
    )

    (draft,) = load_cart_discount_drafts(path)

    assert draft.value.permyriad == 1000
    assert draft.target is not None
    assert draft.target.type is CartDiscountTargetType.LINE_ITEMS
    assert draft.stacking_mode is StackingMode.STOP_AFTER_THIS_DISCOUNT
    assert draft.valid_from is not None
    assert draft.valid_from.year == 2026


def test_load_inventory_drafts(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "inventory.json",
        [
            {"sku": "sku-1", "quantityOnStock": 4},
            {
                "sku": "sku-1",
                "quantityOnStock": 9,
                "supplyChannel": "berlin",
                "restockableInDays": 2,
                "custom": {"type": "stock-meta", "fields": {"shelf": "A3"}},
            },
        ],
    )

    local, berlin = load_inventory_drafts(path)

    assert [local.key, berlin.key] == ["sku-1", "sku-1@berlin"]
    assert berlin.quantity_on_stock == 9
    assert berlin.custom is not None
    assert berlin.custom.fields == {"shelf": "A3"}


def test_inventory_drafts_require_a_quantity(tmp_path: Path) -> None:
    path = _write(tmp_path / "inventory.json", [{"sku": "sku-1"}])

    with pytest.raises(DraftFileError, match="invalid drafts"):
        load_inventory_drafts(path)

def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DraftFileError, match="Cannot read"):
        load_product_drafts(tmp_path / "absent.json")


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DraftFileError, match="not valid JSON"):
        load_category_drafts(path)


def test_top_level_must_be_an_array(tmp_path: Path) -> None:
    path = _write(tmp_path / "object.json", {"key": "tops"})

    with pytest.raises(DraftFileError, match="JSON array"):
        load_category_drafts(path)


def test_schema_violations_are_reported(tmp_path: Path) -> None:
    path = _write(tmp_path / "products.json", [{"key": "shirt", "name": {"en": "Shirt"}}])

    with pytest.raises(DraftFileError, match="invalid drafts"):
        load_product_drafts(path)


def test_inconsistent_discount_values_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "discounts.json",
        [
            {
                "key": "summer",
                "name": {"en": "Summer sale"},
                "value": {"type": "absolute", "money": []},
                "cartPredicate": "1 = 1",
                "sortOrder": "0.1",
            }
        ],
    )

    with pytest.raises(DraftFileError, match="invalid cart discounts"):
        load_cart_discount_drafts(path)


def test_draft_file_errors_are_value_errors() -> None:
    assert issubclass(DraftFileError, ValueError)
