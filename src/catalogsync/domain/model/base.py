"""
Base building blocks shared by every resource kind:
references, money, custom fields, images and assets.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .enums import ReferenceKind

if TYPE_CHECKING:
    from collections.abc import Iterable

type LocalizedString = Mapping[str, str]
type FieldMap = Mapping[str, object]


@dataclass(slots=True, frozen=True, order=True)
class ReferenceKey:
    """Textual reference from a draft to another platform resource."""

    kind: ReferenceKind
    key: str

    def __str__(self) -> str:
        return f"{self.kind}:{self.key}"


class Draft(Protocol):
    """Desired state of one resource as submitted by the caller."""

    @property
    def key(self) -> str | None: ...

    def reference_keys(self) -> tuple[ReferenceKey, ...]: ...


class ExistingResource(Protocol):
    """Current platform state of one resource."""

    @property
    def id(self) -> str: ...

    @property
    def version(self) -> int: ...

    @property
    def key(self) -> str | None: ...


@dataclass(slots=True, frozen=True, kw_only=True)
class Money:
    cent_amount: int
    currency: str


@dataclass(slots=True, frozen=True, kw_only=True)
class CustomFieldsDraft:
    """Custom type and field values requested by a draft.

    ``type`` holds the type key in drafts and the resolved type id once a
    diff builder copied the value into an action.
    """

    type: str
    fields: FieldMap = field(default_factory=dict[str, object])

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        return (ReferenceKey(ReferenceKind.TYPE, self.type),)


@dataclass(slots=True, frozen=True, kw_only=True)
class CustomFields:
    type_id: str
    fields: FieldMap = field(default_factory=dict[str, object])


@dataclass(slots=True, frozen=True, kw_only=True)
class Dimensions:
    width: int
    height: int


@dataclass(slots=True, frozen=True, kw_only=True)
class Image:
    url: str
    dimensions: Dimensions | None = None
    label: str | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class AssetSource:
    uri: str
    key: str | None = None
    content_type: str | None = None
    dimensions: Dimensions | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class AssetDraft:
    key: str
    name: LocalizedString
    description: LocalizedString | None = None
    tags: frozenset[str] = frozenset()
    sources: tuple[AssetSource, ...] = ()
    custom: CustomFieldsDraft | None = None

    def reference_keys(self) -> tuple[ReferenceKey, ...]:
        return self.custom.reference_keys() if self.custom is not None else ()


@dataclass(slots=True, frozen=True, kw_only=True)
class Asset:
    id: str
    key: str | None
    name: LocalizedString
    description: LocalizedString | None = None
    tags: frozenset[str] = frozenset()
    sources: tuple[AssetSource, ...] = ()
    custom: CustomFields | None = None


def collect_reference_keys(*groups: Iterable[ReferenceKey]) -> tuple[ReferenceKey, ...]:
    """Flatten reference keys preserving first-seen order without duplicates."""

    seen: dict[ReferenceKey, None] = {}
    for group in groups:
        for reference in group:
            seen.setdefault(reference, None)
    return tuple(seen)
