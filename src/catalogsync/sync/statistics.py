"""Counters and the summary report of a sync run."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class SyncStatistics:
    """Outcome counters of one run.

    Every draft of the input ends up in exactly one of ``created``,
    ``updated``, ``failed`` or ``skipped``, or in none of them when it was
    already up to date; ``processed`` counts all of them.
    """

    label: str
    processed: int = 0
    created: int = 0
    updated: int = 0
    failed: int = 0
    skipped: int = 0
    failed_keys: list[str | None] = field(default_factory=list[str | None])
    started_at: float = field(default_factory=time.monotonic)
    finished_at: float | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record_created(self) -> None:
        with self._lock:
            self.processed += 1
            self.created += 1

    def record_updated(self) -> None:
        with self._lock:
            self.processed += 1
            self.updated += 1

    def record_unchanged(self) -> None:
        with self._lock:
            self.processed += 1

    def record_skipped(self) -> None:
        with self._lock:
            self.processed += 1
            self.skipped += 1

    def record_failed(self, key: str | None) -> None:
        with self._lock:
            self.processed += 1
            self.failed += 1
            self.failed_keys.append(key)

    def finish(self) -> None:
        self.finished_at = time.monotonic()

    @property
    def elapsed(self) -> float:
        """Seconds since the run started, frozen once it finished."""

        end = self.finished_at if self.finished_at is not None else time.monotonic()
        return end - self.started_at

    @property
    def report_message(self) -> str:
        return (
            f"Summary: {self.processed} {self.label} were processed in total "
            f"({self.created} created, {self.updated} updated and {self.failed} failed to sync)."
        )
