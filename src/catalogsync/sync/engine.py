"""Batch orchestration of a sync run.

The input is validated as a whole and split into batches. Each batch resolves
its references and fetches the existing resources in one round-trip each,
diffs every draft against the frozen snapshot and then submits creates and
updates concurrently. Failures stay scoped to the draft they belong to; a run
never stops because one resource failed.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, assert_never

from catalogsync.domain.errors import ResolutionError, SyncError, TransportError
from catalogsync.domain.model import collect_reference_keys
from catalogsync.domain.reconciliation import (
    MatchedDraft,
    NewDraft,
    ResolvedReferences,
    UnresolvableDraft,
    match_drafts,
    validate_drafts,
)

from .options import SyncOptions
from .statistics import SyncStatistics

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from catalogsync.domain.actions import UpdateAction
    from catalogsync.domain.model import Draft, ExistingResource, ReferenceKey
    from catalogsync.domain.ports import ReferenceResolver, ResourceGateway
    from catalogsync.domain.reconciliation import DraftMatch

    from .syncers import ResourceSyncer

log = getLogger(__name__)


class BatchStage(StrEnum):
    COLLECTED = "collected"
    REFERENCES_RESOLVED = "references_resolved"
    FETCHED = "fetched"
    DIFFED = "diffed"
    APPLYING = "applying"
    DONE = "done"


@dataclass(slots=True, kw_only=True)
class _CreatePlan[TDraft]:
    draft: TDraft
    references: ResolvedReferences


@dataclass(slots=True, kw_only=True)
class _UpdatePlan[TDraft, TResource]:
    draft: TDraft
    resource: TResource
    actions: list[UpdateAction] = field(default_factory=list)


type _Plan[TDraft, TResource] = _CreatePlan[TDraft] | _UpdatePlan[TDraft, TResource]


class Sync[TDraft: Draft, TResource: ExistingResource]:
    """Reconcile drafts of one resource kind against the platform."""

    def __init__(
        self,
        *,
        syncer: ResourceSyncer[TDraft, TResource],
        gateway: ResourceGateway[TDraft, TResource],
        resolver: ReferenceResolver,
        options: SyncOptions[TDraft, TResource] | None = None,
    ) -> None:
        self._syncer = syncer
        self._gateway = gateway
        self._resolver = resolver
        self._options: SyncOptions[TDraft, TResource] = options or SyncOptions()
        self._statistics = SyncStatistics(label=syncer.label)
        self._aborted = False
        # one creation per reference and run, shared by concurrent batches
        self._creations: dict[ReferenceKey, asyncio.Task[str]] = {}

    @property
    def statistics(self) -> SyncStatistics:
        return self._statistics

    @property
    def options(self) -> SyncOptions[TDraft, TResource]:
        return self._options

    def abort(self) -> None:
        """Stop before the next batch; batches already started run to completion."""

        self._aborted = True

    def run(self, drafts: Iterable[TDraft]) -> SyncStatistics:
        """Blocking wrapper around :meth:`sync`."""

        return asyncio.run(self.sync(drafts))

    async def sync(self, drafts: Iterable[TDraft]) -> SyncStatistics:
        self._creations = {}
        valid, errors = validate_drafts(drafts)
        for error in errors:
            self._record_failure(error.key, error)

        batch_size = self._options.batch_size
        batches = [valid[start : start + batch_size] for start in range(0, len(valid), batch_size)]
        log.info(
            "Syncing %s %s in %s batches (batch_size=%s, parallelism=%s)",
            len(valid),
            self._syncer.label,
            len(batches),
            batch_size,
            self._options.parallelism,
        )

        in_flight = asyncio.Semaphore(self._options.parallelism)
        workers = asyncio.Semaphore(self._options.parallelism)
        async with asyncio.TaskGroup() as group:
            for index, batch in enumerate(batches):
                await workers.acquire()
                if self._aborted:
                    workers.release()
                    log.warning("Sync aborted; %s batches not started", len(batches) - index)
                    break
                group.create_task(self._run_worker(index, batch, in_flight, workers))

        self._statistics.finish()
        log.info("%s (%.2fs)", self._statistics.report_message, self._statistics.elapsed)
        return self._statistics

    async def _run_worker(
        self,
        index: int,
        batch: Sequence[TDraft],
        in_flight: asyncio.Semaphore,
        workers: asyncio.Semaphore,
    ) -> None:
        try:
            await self._run_batch(index, batch, in_flight)
        finally:
            workers.release()

    async def _run_batch(
        self,
        index: int,
        batch: Sequence[TDraft],
        in_flight: asyncio.Semaphore,
    ) -> None:
        self._enter_stage(index, BatchStage.COLLECTED)
        try:
            references = await self._resolve_references(batch)
            self._enter_stage(index, BatchStage.REFERENCES_RESOLVED)
            keys = [draft.key for draft in batch if draft.key is not None]
            existing = await self._gateway.fetch_by_keys(keys)
            self._enter_stage(index, BatchStage.FETCHED)
            matches = match_drafts(
                batch, existing, references, auto_create=self._options.ensure_channels
            )
        except SyncError as error:
            self._fail_batch(batch, error)
            return
        except Exception as error:
            log.exception("Unexpected error while preparing batch %s", index)
            self._fail_batch(batch, TransportError(f"Failed to prepare batch: {error}"))
            return

        references = await self._create_missing_channels(matches, references)
        plans = [plan for match in matches if (plan := self._plan(match, references))]
        self._enter_stage(index, BatchStage.DIFFED)

        self._enter_stage(index, BatchStage.APPLYING)
        async with asyncio.TaskGroup() as group:
            for plan in plans:
                group.create_task(self._apply(plan, in_flight))
        self._enter_stage(index, BatchStage.DONE)

    def _enter_stage(self, index: int, stage: BatchStage) -> None:
        log.debug("Batch %s of %s: %s", index, self._syncer.label, stage)

    async def _resolve_references(self, batch: Sequence[TDraft]) -> ResolvedReferences:
        keys = collect_reference_keys(*(draft.reference_keys() for draft in batch))
        if not keys:
            return ResolvedReferences()
        return ResolvedReferences.of(await self._resolver.resolve(keys))

    async def _create_missing_channels(
        self,
        matches: Sequence[DraftMatch[TDraft, TResource]],
        references: ResolvedReferences,
    ) -> ResolvedReferences:
        """Create channels referenced by resolvable drafts but missing on the platform."""

        if not self._options.ensure_channels:
            return references
        wanted: list[ReferenceKey] = [
            reference
            for match in matches
            if not isinstance(match, UnresolvableDraft)
            for reference in references.missing(match.draft.reference_keys())
            if reference.kind.auto_creatable
        ]
        created: dict[ReferenceKey, str] = {}
        for reference in collect_reference_keys(wanted):
            try:
                created[reference] = await self._shared_creation(reference)
            except SyncError as error:
                self._warn(f"Failed to create {reference.kind} '{reference.key}': {error.message}")
            except Exception as error:
                log.exception("Unexpected error while creating %s", reference)
                self._warn(f"Failed to create {reference.kind} '{reference.key}': {error}")
        return references.merged(created) if created else references

    async def _shared_creation(self, reference: ReferenceKey) -> str:
        """Await the run's single creation of ``reference``, starting it if needed.

        Batches run concurrently and may all miss the same channel; only the
        first one calls the resolver, the others wait for its result.
        """

        creation = self._creations.get(reference)
        if creation is None:
            creation = asyncio.create_task(self._create_reference(reference))
            self._creations[reference] = creation
        return await asyncio.shield(creation)

    async def _create_reference(self, reference: ReferenceKey) -> str:
        resource_id = await self._resolver.create(reference)
        log.info("Created missing %s '%s'", reference.kind, reference.key)
        return resource_id

    def _plan(
        self,
        match: DraftMatch[TDraft, TResource],
        references: ResolvedReferences,
    ) -> _Plan[TDraft, TResource] | None:
        match match:
            case UnresolvableDraft(draft=draft, missing=missing):
                names = ", ".join(str(reference) for reference in missing)
                self._record_failure(
                    draft.key,
                    ResolutionError(
                        f"Failed to resolve references of '{draft.key}': {names}",
                        key=draft.key,
                        references=missing,
                    ),
                )
                return None
            case NewDraft(draft=draft):
                return _CreatePlan(draft=draft, references=references)
            case MatchedDraft(draft=draft, resource=resource):
                try:
                    for warning in self._syncer.warnings(resource, draft, references):
                        self._warn(warning)
                    actions = self._syncer.build_actions(
                        resource, draft, references, self._options
                    )
                except SyncError as error:
                    self._record_failure(draft.key, error)
                    return None
                except Exception as error:
                    log.exception("Unexpected error while diffing %s", draft.key)
                    message = f"Unexpected error for '{draft.key}': {error}"
                    self._record_failure(draft.key, TransportError(message, key=draft.key))
                    return None
                return _UpdatePlan(draft=draft, resource=resource, actions=actions)
            case _:
                assert_never(match)

    async def _apply(self, plan: _Plan[TDraft, TResource], in_flight: asyncio.Semaphore) -> None:
        key = plan.draft.key
        try:
            if isinstance(plan, _CreatePlan):
                await self._create(plan, in_flight)
            else:
                await self._update(plan, in_flight)
        except SyncError as error:
            self._record_failure(key, error)
        except Exception as error:
            log.exception("Unexpected error while syncing %s", key)
            self._record_failure(
                key, TransportError(f"Unexpected error for '{key}': {error}", key=key)
            )

    async def _create(self, plan: _CreatePlan[TDraft], in_flight: asyncio.Semaphore) -> None:
        draft = plan.draft
        callback = self._options.before_create_callback
        if callback is not None:
            replacement = self._run_hook("before create", draft.key, callback, draft)
            if replacement is None:
                log.debug("Creation of %s vetoed by callback", draft.key)
                self._statistics.record_skipped()
                return
            draft = replacement
        async with in_flight:
            await self._gateway.create(draft, plan.references)
        self._statistics.record_created()

    async def _update(
        self, plan: _UpdatePlan[TDraft, TResource], in_flight: asyncio.Semaphore
    ) -> None:
        if not plan.actions:
            self._statistics.record_unchanged()
            return
        actions: Sequence[UpdateAction] = plan.actions
        callback = self._options.before_update_callback
        if callback is not None:
            actions = self._run_hook(
                "before update", plan.draft.key, callback, plan.actions, plan.draft, plan.resource
            )
            if not actions:
                log.debug("Update of %s vetoed by callback", plan.draft.key)
                self._statistics.record_skipped()
                return
        async with in_flight:
            await self._gateway.update(plan.resource, actions)
        self._statistics.record_updated()

    def _run_hook[**P, R](
        self,
        name: str,
        key: str | None,
        hook: Callable[P, R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        try:
            return hook(*args, **kwargs)
        except Exception as error:
            log.exception("The %s callback failed for %s", name, key)
            raise SyncError(f"The {name} callback failed for '{key}': {error}", key=key) from error

    def _fail_batch(self, batch: Sequence[TDraft], error: SyncError) -> None:
        for draft in batch:
            self._record_failure(draft.key, error)

    def _record_failure(self, key: str | None, error: SyncError) -> None:
        self._statistics.record_failed(key)
        callback = self._options.error_callback
        if callback is None:
            log.error("%s", error.message)
            return
        try:
            callback(error.message, error)
        except Exception:
            log.exception("The error callback failed for %s", key)

    def _warn(self, message: str) -> None:
        callback = self._options.warning_callback
        if callback is None:
            log.warning("%s", message)
            return
        try:
            callback(message)
        except Exception:
            log.exception("The warning callback failed")
