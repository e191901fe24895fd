"""Port implementations backed by the platform client."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalogsync.domain.errors import ResolutionError, TransportError
from catalogsync.domain.model import ReferenceKey, ReferenceKind, skus_of

from .schema import (
    CartDiscountPayload,
    CategoryPayload,
    InventoryEntryPayload,
    KeyedResourcePayload,
    ProductPayload,
)
from .translator import (
    cart_discount_create_body,
    category_create_body,
    encode_action,
    inventory_create_body,
    parse_cart_discount,
    parse_category,
    parse_inventory_entry,
    parse_product,
    product_create_body,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Mapping, Sequence

    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import (
        CartDiscount,
        CartDiscountDraft,
        Category,
        CategoryDraft,
        Draft,
        ExistingResource,
        InventoryEntry,
        InventoryEntryDraft,
        Product,
        ProductDraft,
    )
    from catalogsync.domain.reconciliation import ResolvedReferences

    from .client import PlatformClient
    from .translator import JsonObject

log = getLogger(__name__)

REFERENCE_PATHS: Mapping[ReferenceKind, str] = {
    ReferenceKind.PRODUCT: "products",
    ReferenceKind.PRODUCT_TYPE: "product-types",
    ReferenceKind.CATEGORY: "categories",
    ReferenceKind.TAX_CATEGORY: "tax-categories",
    ReferenceKind.CHANNEL: "channels",
    ReferenceKind.CUSTOMER_GROUP: "customer-groups",
    ReferenceKind.TYPE: "types",
}
# products, channels and categories can be created during a run, so their lookups bypass the cache
CACHEABLE_KINDS = frozenset(
    {
        ReferenceKind.PRODUCT_TYPE,
        ReferenceKind.TAX_CATEGORY,
        ReferenceKind.CUSTOMER_GROUP,
        ReferenceKind.TYPE,
    }
)
DEFAULT_CHANNEL_ROLES = ("InventorySupply", "ProductDistribution")


def _validate[TModel: BaseModel](model: type[TModel], payload: object, *, context: str) -> TModel:
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise TransportError(f"Malformed {context} payload: {exc}") from exc


class PlatformReferenceResolver:
    """Resolves reference keys of every kind with one query per kind."""

    def __init__(self, client: PlatformClient) -> None:
        self._client = client

    async def resolve(self, keys: Collection[ReferenceKey]) -> Mapping[ReferenceKey, str]:
        by_kind: dict[ReferenceKind, set[str]] = {}
        for reference in keys:
            by_kind.setdefault(reference.kind, set()).add(reference.key)

        resolved: dict[ReferenceKey, str] = {}
        for kind, kind_keys in by_kind.items():
            results = await self._client.query(
                REFERENCE_PATHS[kind], keys=kind_keys, cached=kind in CACHEABLE_KINDS
            )
            for item in results:
                resource = _validate(KeyedResourcePayload, item, context=str(kind))
                if resource.key in kind_keys:
                    resolved[ReferenceKey(kind, resource.key)] = resource.id
        log.debug("Resolved %s of %s references", len(resolved), len(keys))
        return resolved

    async def create(self, reference: ReferenceKey) -> str:
        if not reference.kind.auto_creatable:
            raise ResolutionError(
                f"References of kind {reference.kind} cannot be created",
                references=(reference,),
            )
        payload = await self._client.create(
            REFERENCE_PATHS[reference.kind],
            {"key": reference.key, "roles": list(DEFAULT_CHANNEL_ROLES)},
        )
        return _validate(KeyedResourcePayload, payload, context=str(reference.kind)).id


@dataclass(frozen=True, slots=True)
class ResourceEndpoint[TDraft, TResource]:
    """Paths and translations of one resource kind."""

    path: str
    query_path: str
    query_params: Mapping[str, str]
    parse: Callable[[object], TResource]
    create_body: Callable[[TDraft, ResolvedReferences], JsonObject]
    lookup_field: str = "key"
    lookup_values: Callable[[Collection[str]], Collection[str]] = frozenset


class PlatformResourceGateway[TDraft: Draft, TResource: ExistingResource]:
    """Fetch, create and update resources of the kind described by ``endpoint``."""

    def __init__(
        self, client: PlatformClient, endpoint: ResourceEndpoint[TDraft, TResource]
    ) -> None:
        self._client = client
        self._endpoint = endpoint

    async def fetch_by_keys(self, keys: Collection[str]) -> Mapping[str, TResource]:
        endpoint = self._endpoint
        wanted = set(keys)
        results = await self._client.query(
            endpoint.query_path,
            keys=endpoint.lookup_values(wanted),
            field=endpoint.lookup_field,
            params=dict(endpoint.query_params),
        )
        resources = (endpoint.parse(item) for item in results)
        return {
            resource.key: resource
            for resource in resources
            if resource.key is not None and resource.key in wanted
        }

    async def create(self, draft: TDraft, references: ResolvedReferences) -> TResource:
        body = self._endpoint.create_body(draft, references)
        log.debug("Creating %s %s", self._endpoint.path, draft.key)
        return self._endpoint.parse(await self._client.create(self._endpoint.path, body))

    async def update(self, resource: TResource, actions: Sequence[UpdateAction]) -> TResource:
        log.debug("Updating %s %s with %s actions", self._endpoint.path, resource.key, len(actions))
        payload = await self._client.update(
            self._endpoint.path,
            resource.id,
            version=resource.version,
            actions=[encode_action(action) for action in actions],
            key=resource.key,
        )
        return self._endpoint.parse(payload)


def _parse_product(payload: object) -> Product:
    return parse_product(_validate(ProductPayload, payload, context="product"))


def _parse_category(payload: object) -> Category:
    return parse_category(_validate(CategoryPayload, payload, context="category"))


def _parse_cart_discount(payload: object) -> CartDiscount:
    return parse_cart_discount(_validate(CartDiscountPayload, payload, context="cart discount"))


def _parse_inventory_entry(payload: object) -> InventoryEntry:
    return parse_inventory_entry(_validate(InventoryEntryPayload, payload, context="inventory"))


PRODUCTS: ResourceEndpoint[ProductDraft, Product] = ResourceEndpoint(
    path="products",
    query_path="product-projections",
    query_params={"staged": "true"},
    parse=_parse_product,
    create_body=product_create_body,
)
CATEGORIES: ResourceEndpoint[CategoryDraft, Category] = ResourceEndpoint(
    path="categories",
    query_path="categories",
    query_params={},
    parse=_parse_category,
    create_body=category_create_body,
)
CART_DISCOUNTS: ResourceEndpoint[CartDiscountDraft, CartDiscount] = ResourceEndpoint(
    path="cart-discounts",
    query_path="cart-discounts",
    query_params={},
    parse=_parse_cart_discount,
    create_body=cart_discount_create_body,
)
# entries are looked up by sku; the expanded channel supplies the key of the entry
INVENTORY: ResourceEndpoint[InventoryEntryDraft, InventoryEntry] = ResourceEndpoint(
    path="inventory",
    query_path="inventory",
    query_params={"expand": "supplyChannel"},
    parse=_parse_inventory_entry,
    create_body=inventory_create_body,
    lookup_field="sku",
    lookup_values=skus_of,
)


def product_gateway(client: PlatformClient) -> PlatformResourceGateway[ProductDraft, Product]:
    return PlatformResourceGateway(client, PRODUCTS)


def category_gateway(client: PlatformClient) -> PlatformResourceGateway[CategoryDraft, Category]:
    return PlatformResourceGateway(client, CATEGORIES)


def cart_discount_gateway(
    client: PlatformClient,
) -> PlatformResourceGateway[CartDiscountDraft, CartDiscount]:
    return PlatformResourceGateway(client, CART_DISCOUNTS)



def inventory_gateway(
    client: PlatformClient,
) -> PlatformResourceGateway[InventoryEntryDraft, InventoryEntry]:
    return PlatformResourceGateway(client, INVENTORY)
