"""Ports for resolving textual references to platform identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from catalogsync.domain.model import ReferenceKey


@runtime_checkable
class ReferenceResolver(Protocol):
    """Look up (and for some kinds create) referenced platform resources."""

    async def resolve(self, keys: Collection[ReferenceKey]) -> Mapping[ReferenceKey, str]:
        """Return platform ids for every key that exists; missing keys are omitted."""
        ...

    async def create(self, reference: ReferenceKey) -> str:
        """Create a placeholder resource for ``reference`` and return its id.

        Only called for kinds whose ``auto_creatable`` flag is set.
        """
        ...
