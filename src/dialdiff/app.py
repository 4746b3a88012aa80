"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from dialdiff.adapters.filesystem import discover_sources
from dialdiff.adapters.readers import read_records
from dialdiff.adapters.reports import ReportPaths, write_reports
from dialdiff.adapters.tabular import write_workbook
from dialdiff.adapters.vcard import write_vcards
from dialdiff.config import (
    get_extraction_config,
    get_filter_config,
    get_ingest_config,
    get_missing_config,
    get_output_config,
)
from dialdiff.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    import os
    from pathlib import Path

    from dialdiff.config import (
        ExtractionConfig,
        FilterConfig,
        IngestConfig,
        MissingConfig,
        OutputConfig,
    )
    from dialdiff.domain.ports import RecordReader
    from dialdiff.domain.reconciliation import MissingSet, RunStatistics


log = getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    """Outcome of a missing-contacts run."""

    missing: MissingSet
    stats: RunStatistics
    outputs: list[Path] = field(default_factory=list["Path"])


def find_missing_contacts(
    master_dir: str | os.PathLike[str],
    compare_dir: str | os.PathLike[str],
    *,
    reader: RecordReader | None = None,
    extraction: ExtractionConfig | None = None,
    filtering: FilterConfig | None = None,
    ingest: IngestConfig | None = None,
    missing: MissingConfig | None = None,
    output: OutputConfig | None = None,
) -> RunResult:
    """Ingest both corpora, compute the missing set and write the selected outputs."""

    extraction_config = extraction or get_extraction_config()
    filter_config = filtering or get_filter_config()
    ingest_config = ingest or get_ingest_config()
    missing_config = missing or get_missing_config()
    output_config = output or get_output_config()

    engine = ReconciliationEngine(
        reader=reader or read_records,
        extractor=extraction_config.build_extractor(),
        policy=filter_config.build_policy(),
        missing_computer=missing_config.build_computer(),
        batch_size=ingest_config.batch_size,
    )
    log.info(
        "Starting reconciliation: master=%s, compare=%s, order=%s, unique_names=%s",
        master_dir,
        compare_dir,
        missing_config.order,
        missing_config.unique_names,
    )

    engine.ingest(discover_sources(master_dir), discover_sources(compare_dir))
    missing_set = engine.compute_missing()
    stats = engine.statistics(missing_set)

    outputs = _write_outputs(engine, missing_set, stats, output_config)
    _log_summary(stats)
    return RunResult(missing=missing_set, stats=stats, outputs=outputs)


def _write_outputs(
    engine: ReconciliationEngine,
    missing_set: MissingSet,
    stats: RunStatistics,
    output: OutputConfig,
) -> list[Path]:
    written: list[Path] = []
    if output.writes_vcard:
        path = output.vcard_path()
        write_vcards(missing_set.identities, path)
        written.append(path)
    if output.writes_workbook:
        path = output.workbook_path()
        write_workbook(missing_set.identities, path)
        written.append(path)
    if output.write_reports:
        paths = ReportPaths.in_directory(output.ensure_output_dir())
        write_reports(
            paths,
            master=engine.master,
            compare=engine.compare,
            missing=missing_set,
            stats=stats,
        )
        written.extend(
            (paths.master, paths.compare, paths.missing, paths.duplicates, paths.run_stats)
        )
    return written


def _log_summary(stats: RunStatistics) -> None:
    log.info(
        "Processing complete: total_files=%s, processed_files=%s, skipped_files=%s, errors=%s",
        stats.total_files,
        stats.processed_files,
        stats.skipped_files,
        stats.errors,
    )
    log.info(
        "Contacts: master=%s/%s, compare=%s/%s (unique/total), missing=%s",
        stats.unique_master,
        stats.total_master,
        stats.unique_compare,
        stats.total_compare,
        stats.missing,
    )
    for failure in stats.failures:
        log.warning("Failed %s file %s: %s", failure.corpus, failure.path, failure.message)
