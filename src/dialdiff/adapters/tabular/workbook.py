"""Spreadsheet reader and writer (openpyxl)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font

from dialdiff.domain.model import TabularRow

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from pathlib import Path

    from dialdiff.domain.model import Identity, RawValue

MISSING_SHEET_TITLE: Final[str] = "Missing"
MISSING_HEADERS: Final[tuple[str, str]] = ("Name", "Phone")

log = logging.getLogger(__name__)


def read_workbook_rows(path: Path) -> Iterator[TabularRow]:
    """Lazily yield rows of the first sheet, keyed by the header row."""

    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        rows = sheet.iter_rows(values_only=True)
        header = next(rows, None)
        if header is None:
            log.debug("Empty sheet %s in %s", sheet.title, path)
            return
        columns = header_columns(header)
        for cells in rows:
            row = tabular_row(columns, cells)
            if row is not None:
                yield row
    finally:
        workbook.close()


def header_columns(header: Sequence[RawValue]) -> list[str | None]:
    return [(str(cell).strip() or None) if cell is not None else None for cell in header]


def tabular_row(columns: Sequence[str | None], cells: Sequence[RawValue]) -> TabularRow | None:
    """Pair non-empty cells with their header; ``None`` when nothing is left."""

    values = {
        column: cell
        for column, cell in zip(columns, cells, strict=False)
        if column and cell is not None and cell != ""
    }
    return TabularRow.from_mapping(values) if values else None


def write_workbook(identities: Iterable[Identity], path: Path) -> int:
    """Write identities to a single-sheet workbook and return the row count."""

    path.parent.mkdir(parents=True, exist_ok=True)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = MISSING_SHEET_TITLE
    sheet.append(MISSING_HEADERS)
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    written = 0
    for identity in identities:
        sheet.append((identity.name, identity.phone))
        written += 1

    sheet.freeze_panes = "A2"
    workbook.save(path)
    log.info("Wrote %s rows to %s", written, path)
    return written
