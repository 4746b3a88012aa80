"""Orchestrator for the reconciliation subsystem.

The engine folds record streams into the master and comparison stores, then
diffs them. Ingestion is sequential: the master corpus must be complete before
comparison records arrive, because the missing set depends on the full master
index. A file that fails to decode is recorded and skipped; anything raised
outside the per-file boundary (for example while discovering files) aborts
the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import batched
from typing import TYPE_CHECKING, Final

from dialdiff.domain.model import Corpus

from .extract import IdentityExtractor
from .missing import MissingSet, MissingSetComputer
from .policy import FilterPolicy
from .stats import FileCounters, FileFailure, IngestEvent, IngestEventKind, RunStatistics
from .store import ReconciliationStore, add_compare_identity, add_master_identity

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from dialdiff.domain.model import Identity
    from dialdiff.domain.ports import RecordReader, SourceFile

    type EventHook = Callable[[IngestEvent], None]

DEFAULT_BATCH_SIZE: Final[int] = 1000

log = logging.getLogger(__name__)


class IngestOrderError(RuntimeError):
    """Raised when master records arrive after comparison ingestion started."""


@dataclass(slots=True, kw_only=True)
class ReconciliationEngine:
    """Ingest both corpora and compute the missing set."""

    reader: RecordReader
    extractor: IdentityExtractor = field(default_factory=IdentityExtractor)
    policy: FilterPolicy = field(default_factory=FilterPolicy)
    missing_computer: MissingSetComputer = field(default_factory=MissingSetComputer)
    batch_size: int = DEFAULT_BATCH_SIZE
    on_event: EventHook | None = None
    master: ReconciliationStore = field(
        default_factory=lambda: ReconciliationStore(Corpus.MASTER)
    )
    compare: ReconciliationStore = field(
        default_factory=lambda: ReconciliationStore(Corpus.COMPARE)
    )
    counters: FileCounters = field(default_factory=FileCounters)
    _compare_started: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")

    def ingest(
        self,
        master_sources: Iterable[SourceFile],
        compare_sources: Iterable[SourceFile],
    ) -> None:
        """Ingest the master corpus completely, then the comparison corpus."""

        self.ingest_master(master_sources)
        self.ingest_compare(compare_sources)

    def ingest_master(self, sources: Iterable[SourceFile]) -> None:
        if self._compare_started:
            raise IngestOrderError("Master corpus must be ingested before the comparison corpus")
        for source in sources:
            self._ingest_file(source, Corpus.MASTER, self._add_master)

    def ingest_compare(self, sources: Iterable[SourceFile]) -> None:
        self._compare_started = True
        for source in sources:
            self._ingest_file(source, Corpus.COMPARE, self._add_compare)

    def compute_missing(self) -> MissingSet:
        missing = self.missing_computer(self.compare, self.master)
        log.info(
            "Missing contacts: master=%s, compare=%s, missing=%s",
            len(self.master),
            len(self.compare),
            len(missing),
        )
        return missing

    def statistics(self, missing: MissingSet | None = None) -> RunStatistics:
        return RunStatistics(
            total_files=self.counters.total_files,
            processed_files=self.counters.processed_files,
            skipped_files=self.counters.skipped_files,
            errors=self.counters.errors,
            total_master=self.master.total_occurrences,
            unique_master=len(self.master),
            total_compare=self.compare.total_occurrences,
            unique_compare=len(self.compare),
            missing=len(missing) if missing is not None else 0,
            failures=tuple(self.counters.failures),
        )

    def _add_master(self, identity: Identity) -> None:
        add_master_identity(self.master, identity)

    def _add_compare(self, identity: Identity) -> None:
        add_compare_identity(self.compare, identity, policy=self.policy)

    def _ingest_file(
        self,
        source: SourceFile,
        corpus: Corpus,
        add: Callable[[Identity], None],
    ) -> None:
        self.counters.total_files += 1
        if source.kind is None:
            self.counters.skipped_files += 1
            log.debug("Skipping unsupported %s file %s", corpus, source.path)
            return

        records = 0
        try:
            for batch in batched(self.reader(source), self.batch_size):
                for record in batch:
                    for identity in self.extractor(record):
                        add(identity)
                records += len(batch)
                log.debug("Ingested %s records from %s", records, source.path)
        except Exception as exc:  # noqa: BLE001
            message = str(exc) or type(exc).__name__
            self.counters.failures.append(
                FileFailure(path=source.path, corpus=corpus, message=message)
            )
            log.error("Error processing %s file %s: %s", corpus, source.path, message)  # noqa: TRY400
            self._emit(IngestEventKind.ERROR, corpus, source, message)
            return

        self.counters.processed_files += 1
        log.info("Processed %s file %s (%s records)", corpus, source.path, records)
        self._emit(IngestEventKind.PROGRESS, corpus, source, f"Processed {source.path}")

    def _emit(
        self,
        kind: IngestEventKind,
        corpus: Corpus,
        source: SourceFile,
        message: str,
    ) -> None:
        if self.on_event is not None:
            self.on_event(IngestEvent(kind=kind, corpus=corpus, path=source.path, message=message))
