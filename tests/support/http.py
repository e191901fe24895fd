"""Mock transport plumbing for platform client tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx

from catalogsync.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from catalogsync.config import ResilienceConfig


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory


def request_json(request: httpx.Request) -> object:
    return json.loads(request.content)


CART_DISCOUNT_PAYLOAD: dict[str, object] = {
    "id": "cd-1",
    "version": 2,
    "key": "summer",
    "name": {"en": "Summer sale"},
    "value": {"type": "relative", "permyriad": 1000},
    "cartPredicate": "1 = 1",
    "target": {"type": "lineItems", "predicate": "1 = 1"},
    "sortOrder": "0.1",
    "isActive": True,
    "requiresDiscountCode": False,
    "stackingMode": "Stacking",
}

PRODUCT_STAGED_DATA: dict[str, object] = {
    "name": {"en": "Shirt"},
    "slug": {"en": "shirt"},
    "masterVariant": {
        "id": 1,
        "key": "v1",
        "sku": "sku-v1",
        "attributes": [{"name": "size", "value": "M"}],
        "prices": [
            {
                "id": "price-1",
                "value": {"centAmount": 1000, "currencyCode": "EUR"},
                "channel": {"typeId": "channel", "id": "ch-1"},
            }
        ],
        "images": [{"url": "https://img.example.test/1.png", "dimensions": {"w": 10, "h": 20}}],
    },
    "variants": [],
    "categories": [{"typeId": "category", "id": "c-1"}],
    "taxCategory": {"typeId": "tax-category", "id": "tc-1"},
}

PRODUCT_PROJECTION_PAYLOAD: dict[str, object] = {
    "id": "prod-1",
    "version": 4,
    "key": "shirt",
    "productType": {"typeId": "product-type", "id": "pt-apparel"},
    **PRODUCT_STAGED_DATA,
}

PRODUCT_PAYLOAD: dict[str, object] = {
    "id": "prod-1",
    "version": 5,
    "key": "shirt",
    "productType": {"typeId": "product-type", "id": "pt-apparel"},
    "masterData": {"published": False, "staged": PRODUCT_STAGED_DATA},
}
