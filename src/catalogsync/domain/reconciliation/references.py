"""Per-batch snapshot of resolved references."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from catalogsync.domain.errors import ResolutionError
from catalogsync.domain.model import ReferenceKey

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from catalogsync.domain.model import ReferenceKind


def _freeze(ids: Mapping[ReferenceKey, str]) -> Mapping[ReferenceKey, str]:
    return MappingProxyType(dict(ids))


@dataclass(slots=True, frozen=True)
class ResolvedReferences:
    """Immutable mapping from reference keys to platform ids.

    Built once per batch after the resolver round-trip and shared read-only
    by every diff builder of that batch.
    """

    ids: Mapping[ReferenceKey, str] = field(default_factory=lambda: _freeze({}))

    @classmethod
    def of(cls, ids: Mapping[ReferenceKey, str]) -> ResolvedReferences:
        return cls(ids=_freeze(ids))

    def __contains__(self, reference: object) -> bool:
        return reference in self.ids

    def get(self, kind: ReferenceKind, key: str) -> str | None:
        return self.ids.get(ReferenceKey(kind, key))

    def id_for(self, kind: ReferenceKind, key: str) -> str:
        resolved = self.get(kind, key)
        if resolved is None:
            reference = ReferenceKey(kind, key)
            raise ResolutionError(
                f"Failed to resolve {kind} reference with key '{key}'",
                references=(reference,),
            )
        return resolved

    def optional_id_for(self, kind: ReferenceKind, key: str | None) -> str | None:
        if key is None:
            return None
        return self.id_for(kind, key)

    def missing(self, keys: Iterable[ReferenceKey]) -> tuple[ReferenceKey, ...]:
        return tuple(key for key in keys if key not in self.ids)

    def merged(self, ids: Mapping[ReferenceKey, str]) -> ResolvedReferences:
        """Return a new snapshot extended with ``ids``."""

        return ResolvedReferences.of({**self.ids, **ids})
