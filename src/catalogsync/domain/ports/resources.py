"""Ports for reading and writing the resources being synced."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.reconciliation.references import ResolvedReferences


@runtime_checkable
class ResourceFetcher[TResource](Protocol):
    """Fetch existing resources for a set of keys in one round-trip."""

    async def fetch_by_keys(self, keys: Collection[str]) -> Mapping[str, TResource]: ...


@runtime_checkable
class ResourceCreator[TDraft, TResource](Protocol):
    """Create a resource from a draft.

    ``references`` carries the resolved ids for the draft's reference keys.
    Raises ``TransportError`` on failure.
    """

    async def create(self, draft: TDraft, references: ResolvedReferences) -> TResource: ...


@runtime_checkable
class ResourceUpdater[TResource](Protocol):
    """Apply ordered update actions to an existing resource.

    Uses the resource's id and version; raises ``ConflictError`` when the
    version is stale and ``TransportError`` for any other failure.
    """

    async def update(self, resource: TResource, actions: Sequence[UpdateAction]) -> TResource: ...


@runtime_checkable
class ResourceGateway[TDraft, TResource](
    ResourceFetcher[TResource],
    ResourceCreator[TDraft, TResource],
    ResourceUpdater[TResource],
    Protocol,
):
    """Fetcher, creator and updater for one resource kind."""
