"""Identity resolution and reconciliation core.

Layered flow:
1) canonicalize phone values and clean names
2) extract ``{phone, name}`` identities from raw records
3) insert into the master store (upsert) or comparison store (filtered upsert)
4) diff comparison against master into an ordered missing set
"""

from __future__ import annotations

from .engine import DEFAULT_BATCH_SIZE, IngestOrderError, ReconciliationEngine
from .extract import IdentityExtractor
from .missing import MissingSet, MissingSetComputer
from .names import normalize_name, resolve_display_name
from .phone import canonicalize_phone
from .policy import FilterPolicy, Rejection
from .stats import FileFailure, IngestEvent, IngestEventKind, RunStatistics
from .store import ReconciliationStore, add_compare_identity, add_master_identity

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "FileFailure",
    "FilterPolicy",
    "IdentityExtractor",
    "IngestEvent",
    "IngestEventKind",
    "IngestOrderError",
    "MissingSet",
    "MissingSetComputer",
    "ReconciliationEngine",
    "ReconciliationStore",
    "Rejection",
    "RunStatistics",
    "add_compare_identity",
    "add_master_identity",
    "canonicalize_phone",
    "normalize_name",
    "resolve_display_name",
]
