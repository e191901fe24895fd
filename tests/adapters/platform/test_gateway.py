from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from catalogsync.adapters.platform import (
    PlatformClient,
    PlatformReferenceResolver,
    cart_discount_gateway,
    inventory_gateway,
    product_gateway,
)
from catalogsync.config import get_platform_config
from catalogsync.domain.actions import ChangeQuantity, SetField
from catalogsync.domain.errors import ResolutionError
from catalogsync.domain.model import ReferenceKey, ReferenceKind
from tests.helpers.catalog import (
    make_cart_discount,
    make_cart_discount_draft,
    make_inventory_entry,
    make_references,
)
from tests.support.http import (
    CART_DISCOUNT_PAYLOAD,
    PRODUCT_PROJECTION_PAYLOAD,
    make_client_factory,
    request_json,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

pytestmark = pytest.mark.usefixtures("platform_env")


def _run[T](
    handler: Callable[[httpx.Request], httpx.Response],
    body: Callable[[PlatformClient], Awaitable[T]],
) -> T:
    async def run() -> T:
        async with PlatformClient(
            config=get_platform_config(), client_factory=make_client_factory(handler)
        ) as client:
            return await body(client)

    return asyncio.run(run())


def test_resolver_queries_each_kind_once() -> None:
    seen: list[httpx.Request] = []
    results = {
        "/demo-shop/product-types": [{"id": "pt-1", "key": "apparel"}],
        "/demo-shop/channels": [{"id": "ch-1", "key": "store"}, {"id": "ch-x", "key": "other"}],
    }

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": results[request.url.path]})

    keys = [
        ReferenceKey(ReferenceKind.PRODUCT_TYPE, "apparel"),
        ReferenceKey(ReferenceKind.CHANNEL, "store"),
        ReferenceKey(ReferenceKind.CHANNEL, "outlet"),
    ]

    resolved = _run(handler, lambda client: PlatformReferenceResolver(client).resolve(keys))

    assert resolved == {
        ReferenceKey(ReferenceKind.PRODUCT_TYPE, "apparel"): "pt-1",
        ReferenceKey(ReferenceKind.CHANNEL, "store"): "ch-1",
    }
    assert sorted(request.url.path for request in seen) == [
        "/demo-shop/channels",
        "/demo-shop/product-types",
    ]
    channel_request = next(r for r in seen if r.url.path.endswith("channels"))
    assert channel_request.url.params["where"] == 'key in ("outlet", "store")'


def test_resolver_creates_channels_with_supply_and_distribution_roles() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": "ch-new", "key": "outlet", "version": 1})

    channel = ReferenceKey(ReferenceKind.CHANNEL, "outlet")

    created = _run(handler, lambda client: PlatformReferenceResolver(client).create(channel))

    assert created == "ch-new"
    assert seen[0].url.path == "/demo-shop/channels"
    assert request_json(seen[0]) == {
        "key": "outlet",
        "roles": ["InventorySupply", "ProductDistribution"],
    }


def test_resolver_refuses_to_create_other_kinds() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError(f"unexpected request {request.url}")

    tax_category = ReferenceKey(ReferenceKind.TAX_CATEGORY, "standard")

    with pytest.raises(ResolutionError) as exc:
        _run(handler, lambda client: PlatformReferenceResolver(client).create(tax_category))

    assert exc.value.references == (tax_category,)


def test_product_gateway_reads_staged_projections() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": [PRODUCT_PROJECTION_PAYLOAD]})

    products = _run(handler, lambda client: product_gateway(client).fetch_by_keys(["shirt"]))

    assert list(products) == ["shirt"]
    assert products["shirt"].version == 4
    assert seen[0].url.path == "/demo-shop/product-projections"
    assert seen[0].url.params["staged"] == "true"


def test_cart_discount_gateway_create_and_update() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=CART_DISCOUNT_PAYLOAD)

    async def body(client: PlatformClient) -> None:
        gateway = cart_discount_gateway(client)
        await gateway.create(make_cart_discount_draft("summer"), make_references())
        await gateway.update(
            make_cart_discount("summer", id="cd-1"), [SetField(field="is_active", value=False)]
        )

    _run(handler, body)

    create_request, update_request = seen
    assert create_request.url.path == "/demo-shop/cart-discounts"
    assert request_json(create_request)["key"] == "summer"  # type: ignore[index]
    assert update_request.url.path == "/demo-shop/cart-discounts/cd-1"
    assert request_json(update_request) == {
        "version": 1,
        "actions": [{"action": "changeIsActive", "isActive": False}],
    }


def _inventory_payload(entry_id: str, sku: str, channel: str | None) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": entry_id,
        "version": 2,
        "sku": sku,
        "quantityOnStock": 3,
    }
    if channel is not None:
        payload["supplyChannel"] = {
            "typeId": "channel",
            "id": f"ch-{channel}",
            "obj": {"id": f"ch-{channel}", "key": channel},
        }
    return payload


def test_inventory_gateway_queries_by_sku_and_keys_entries_by_channel() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        results = [
            _inventory_payload("inv-1", "sku-1", None),
            _inventory_payload("inv-2", "sku-1", "berlin"),
            _inventory_payload("inv-3", "sku-1", "hamburg"),
        ]
        return httpx.Response(200, json={"results": results})

    entries = _run(
        handler,
        lambda client: inventory_gateway(client).fetch_by_keys(["sku-1", "sku-1@berlin"]),
    )

    assert sorted(entries) == ["sku-1", "sku-1@berlin"]
    assert entries["sku-1@berlin"].id == "inv-2"
    params = seen[0].url.params
    assert seen[0].url.path == "/demo-shop/inventory"
    assert params["where"] == 'sku in ("sku-1", "sku-1@berlin")'
    assert params["expand"] == "supplyChannel"
    assert params["limit"] == "500"


def test_inventory_gateway_update_posts_quantity_change() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_inventory_payload("inv-1", "sku-1", None))

    _run(
        handler,
        lambda client: inventory_gateway(client).update(
            make_inventory_entry(id="inv-1"), [ChangeQuantity(quantity=8)]
        ),
    )

    assert seen[0].url.path == "/demo-shop/inventory/inv-1"
    assert request_json(seen[0]) == {
        "version": 1,
        "actions": [{"action": "changeQuantity", "quantity": 8}],
    }
