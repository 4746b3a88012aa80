"""Ingestion defaults."""

from __future__ import annotations

from dataclasses import dataclass

from dialdiff.domain.reconciliation import DEFAULT_BATCH_SIZE

from .env import env_int


@dataclass(frozen=True, slots=True)
class IngestConfig:
    batch_size: int = DEFAULT_BATCH_SIZE


def get_ingest_config(*, batch_size: int | None = None) -> IngestConfig:
    if batch_size is not None:
        if batch_size < 1:
            raise ValueError("Batch size must be at least 1")
        return IngestConfig(batch_size=batch_size)
    return IngestConfig(batch_size=env_int("DIALDIFF_BATCH_SIZE", DEFAULT_BATCH_SIZE, minimum=1))
