"""Public interface for the JSON report adapter."""

from __future__ import annotations

from .schema import DuplicateReport, FrequencyEntry, IdentityList, IdentityPayload, RunStatsPayload
from .writer import (
    ReportPaths,
    duplicate_report,
    identity_list,
    run_stats_payload,
    write_reports,
)

__all__ = [
    "DuplicateReport",
    "FrequencyEntry",
    "IdentityList",
    "IdentityPayload",
    "ReportPaths",
    "RunStatsPayload",
    "duplicate_report",
    "identity_list",
    "run_stats_payload",
    "write_reports",
]
