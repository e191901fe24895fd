"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from catalogsync.adapters.platform import (
    PlatformClient,
    PlatformReferenceResolver,
    cart_discount_gateway,
    category_gateway,
    inventory_gateway,
    product_gateway,
)
from catalogsync.config import get_platform_config, get_sync_config
from catalogsync.sync import (
    CartDiscountSyncer,
    CategorySyncer,
    InventorySyncer,
    ProductSyncer,
    Sync,
    SyncOptions,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from catalogsync.adapters.http_resilience import ResilientClient
    from catalogsync.config import PlatformConfig, ResilienceConfig
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
    from catalogsync.domain.ports import ResourceGateway
    from catalogsync.sync import ResourceSyncer, SyncStatistics

    type ClientFactory = Callable[[ResilienceConfig], ResilientClient]
    type GatewayFactory[TDraft, TResource] = Callable[
        [PlatformClient], ResourceGateway[TDraft, TResource]
    ]

log = getLogger(__name__)


def sync_products(
    drafts: Iterable[ProductDraft],
    *,
    options: SyncOptions[ProductDraft, Product] | None = None,
    platform_config: PlatformConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncStatistics:
    """Synchronise product drafts using the configured platform adapter."""

    return _run(
        ProductSyncer(),
        product_gateway,
        drafts,
        options=options,
        platform_config=platform_config,
        client_factory=client_factory,
    )


def sync_categories(
    drafts: Iterable[CategoryDraft],
    *,
    options: SyncOptions[CategoryDraft, Category] | None = None,
    platform_config: PlatformConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncStatistics:
    """Synchronise category drafts using the configured platform adapter."""

    return _run(
        CategorySyncer(),
        category_gateway,
        drafts,
        options=options,
        platform_config=platform_config,
        client_factory=client_factory,
    )


def sync_cart_discounts(
    drafts: Iterable[CartDiscountDraft],
    *,
    options: SyncOptions[CartDiscountDraft, CartDiscount] | None = None,
    platform_config: PlatformConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncStatistics:
    """Synchronise cart discount drafts using the configured platform adapter."""

    return _run(
        CartDiscountSyncer(),
        cart_discount_gateway,
        drafts,
        options=options,
        platform_config=platform_config,
        client_factory=client_factory,
    )


def sync_inventory_entries(
    drafts: Iterable[InventoryEntryDraft],
    *,
    options: SyncOptions[InventoryEntryDraft, InventoryEntry] | None = None,
    platform_config: PlatformConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> SyncStatistics:
    """Synchronise inventory entry drafts using the configured platform adapter."""

    return _run(
        InventorySyncer(),
        inventory_gateway,
        drafts,
        options=options,
        platform_config=platform_config,
        client_factory=client_factory,
    )


def _run[TDraft: Draft, TResource: ExistingResource](
    syncer: ResourceSyncer[TDraft, TResource],
    gateway_factory: GatewayFactory[TDraft, TResource],
    drafts: Iterable[TDraft],
    *,
    options: SyncOptions[TDraft, TResource] | None,
    platform_config: PlatformConfig | None,
    client_factory: ClientFactory | None,
) -> SyncStatistics:
    effective_config = platform_config or get_platform_config()
    effective_options = options or SyncOptions.from_config(get_sync_config())
    log.info(
        "Starting %s sync for project %s: batch_size=%s, parallelism=%s, ensure_channels=%s",
        syncer.label,
        effective_config.project_key,
        effective_options.batch_size,
        effective_options.parallelism,
        effective_options.ensure_channels,
    )

    async def run_sync() -> SyncStatistics:
        async with PlatformClient(
            config=effective_config, client_factory=client_factory
        ) as client:
            sync = Sync(
                syncer=syncer,
                gateway=gateway_factory(client),
                resolver=PlatformReferenceResolver(client),
                options=effective_options,
            )
            return await sync.sync(drafts)

    statistics = asyncio.run(run_sync())
    log.info(
        "Finished %s sync: processed=%s, created=%s, updated=%s, failed=%s, skipped=%s",
        syncer.label,
        statistics.processed,
        statistics.created,
        statistics.updated,
        statistics.failed,
        statistics.skipped,
    )
    return statistics
