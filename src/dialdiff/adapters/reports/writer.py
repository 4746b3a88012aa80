"""Write diagnostic JSON reports for a finished run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .schema import (
    DuplicateReport,
    FailurePayload,
    FrequencyEntry,
    IdentityList,
    IdentityPayload,
    RunStatsPayload,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pydantic import BaseModel

    from dialdiff.domain.model import Identity
    from dialdiff.domain.reconciliation import MissingSet, ReconciliationStore, RunStatistics

MASTER_REPORT: Final[str] = "master_numbers.json"
COMPARE_REPORT: Final[str] = "compare_numbers.json"
MISSING_REPORT: Final[str] = "missing_numbers.json"
DUPLICATES_REPORT: Final[str] = "duplicates.json"
RUN_STATS_REPORT: Final[str] = "run_stats.json"

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportPaths:
    master: Path
    compare: Path
    missing: Path
    duplicates: Path
    run_stats: Path

    @classmethod
    def in_directory(cls, directory: Path) -> ReportPaths:
        return cls(
            master=directory / MASTER_REPORT,
            compare=directory / COMPARE_REPORT,
            missing=directory / MISSING_REPORT,
            duplicates=directory / DUPLICATES_REPORT,
            run_stats=directory / RUN_STATS_REPORT,
        )


def identity_list(identities: Iterable[Identity]) -> IdentityList:
    payloads = [
        IdentityPayload(phone=identity.phone, name=identity.name) for identity in identities
    ]
    return IdentityList(count=len(payloads), identities=payloads)


def duplicate_report(
    master: ReconciliationStore,
    compare: ReconciliationStore,
    missing: MissingSet,
    *,
    min_count: int = 2,
) -> DuplicateReport:
    """Build the three ``(key, count)`` tables, keeping keys seen at least ``min_count`` times."""

    return DuplicateReport(
        master_phones=_entries(master.frequency_table(min_count=min_count)),
        compare_phones=_entries(compare.frequency_table(min_count=min_count)),
        missing_names=_entries(missing.name_frequency_table(min_count=min_count)),
    )


def run_stats_payload(stats: RunStatistics) -> RunStatsPayload:
    return RunStatsPayload(
        total_files=stats.total_files,
        processed_files=stats.processed_files,
        skipped_files=stats.skipped_files,
        errors=stats.errors,
        total_master=stats.total_master,
        unique_master=stats.unique_master,
        total_compare=stats.total_compare,
        unique_compare=stats.unique_compare,
        missing=stats.missing,
        failures=[
            FailurePayload(
                path=str(failure.path), corpus=str(failure.corpus), message=failure.message
            )
            for failure in stats.failures
        ],
    )


def write_reports(
    paths: ReportPaths,
    *,
    master: ReconciliationStore,
    compare: ReconciliationStore,
    missing: MissingSet,
    stats: RunStatistics,
) -> None:
    _dump(paths.master, identity_list(master))
    _dump(paths.compare, identity_list(compare))
    _dump(paths.missing, identity_list(missing.identities))
    _dump(paths.duplicates, duplicate_report(master, compare, missing))
    _dump(paths.run_stats, run_stats_payload(stats))


def _entries(table: Iterable[tuple[str, int]]) -> list[FrequencyEntry]:
    return [FrequencyEntry(key=key, count=count) for key, count in table]


def _dump(path: Path, model: BaseModel) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
    log.debug("Wrote report %s", path)
