"""Match results shared by the matcher and the sync orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from catalogsync.domain.model import ReferenceKey


class MatchStatus(StrEnum):
    """How a draft relates to the platform state of its batch."""

    NEW = "new"
    MATCHED = "matched"
    UNRESOLVABLE = "unresolvable"


@dataclass(slots=True, frozen=True, kw_only=True)
class NewDraft[TDraft]:
    """No existing resource shares the draft key: create it."""

    draft: TDraft
    status: Literal[MatchStatus.NEW] = MatchStatus.NEW


@dataclass(slots=True, frozen=True, kw_only=True)
class MatchedDraft[TDraft, TResource]:
    """An existing resource shares the draft key: diff the pair."""

    draft: TDraft
    resource: TResource
    status: Literal[MatchStatus.MATCHED] = MatchStatus.MATCHED


@dataclass(slots=True, frozen=True, kw_only=True)
class UnresolvableDraft[TDraft]:
    """Required references are missing: report and skip the draft."""

    draft: TDraft
    missing: tuple[ReferenceKey, ...]
    status: Literal[MatchStatus.UNRESOLVABLE] = MatchStatus.UNRESOLVABLE

    def __post_init__(self) -> None:
        if not self.missing:
            raise ValueError("Unresolvable drafts must name at least one missing reference")


type DraftMatch[TDraft, TResource] = (
    NewDraft[TDraft] | MatchedDraft[TDraft, TResource] | UnresolvableDraft[TDraft]
)
