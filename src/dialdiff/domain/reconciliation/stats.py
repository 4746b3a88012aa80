"""Run statistics and diagnostic events emitted during ingestion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from dialdiff.domain.model import Corpus


class IngestEventKind(StrEnum):
    PROGRESS = "progress"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class IngestEvent:
    kind: IngestEventKind
    corpus: Corpus
    path: Path
    message: str


@dataclass(frozen=True, slots=True)
class FileFailure:
    """A source file that failed to decode; ingestion continued past it."""

    path: Path
    corpus: Corpus
    message: str


@dataclass(slots=True)
class FileCounters:
    total_files: int = 0
    processed_files: int = 0
    skipped_files: int = 0
    failures: list[FileFailure] = field(default_factory=list["FileFailure"])

    @property
    def errors(self) -> int:
        return len(self.failures)


@dataclass(frozen=True, slots=True, kw_only=True)
class RunStatistics:
    """Summary of one run, consumed by reporters only."""

    total_files: int
    processed_files: int
    skipped_files: int
    errors: int
    total_master: int
    unique_master: int
    total_compare: int
    unique_compare: int
    missing: int
    failures: tuple[FileFailure, ...] = ()
