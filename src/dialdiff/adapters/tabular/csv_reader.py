"""Delimited-text reader."""

from __future__ import annotations

import csv
import logging
from typing import TYPE_CHECKING

from dialdiff.domain.model import TabularRow

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

log = logging.getLogger(__name__)


def read_csv_rows(path: Path) -> Iterator[TabularRow]:
    """Lazily yield one :class:`TabularRow` per data line; the first line is the header."""

    with path.open(encoding="utf-8-sig", errors="replace", newline="") as handle:
        reader = csv.DictReader(handle, skipinitialspace=True)
        for row in reader:
            values = {
                key.strip(): value.strip() if isinstance(value, str) else value
                for key, value in row.items()
                # overflow cells land under the ``None`` key
                if key is not None
            }
            if not any(values.values()):
                continue
            yield TabularRow.from_mapping(values)
        log.debug("Read %s lines from %s", reader.line_num, path)
