"""Legacy ``.xls`` (BIFF) reader backed by xlrd."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import xlrd

from .workbook import header_columns, tabular_row

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from dialdiff.domain.model import TabularRow

log = logging.getLogger(__name__)


def read_legacy_workbook_rows(path: Path) -> Iterator[TabularRow]:
    """Lazily yield rows of the first sheet of an ``.xls`` file, keyed by the header row."""

    book = xlrd.open_workbook(str(path), on_demand=True)
    try:
        if book.nsheets == 0:
            log.debug("No sheets in %s", path)
            return
        sheet = book.sheet_by_index(0)
        if sheet.nrows == 0:
            log.debug("Empty sheet %s in %s", sheet.name, path)
            return
        columns = header_columns(sheet.row_values(0))
        for index in range(1, sheet.nrows):
            row = tabular_row(columns, sheet.row_values(index))
            if row is not None:
                yield row
    finally:
        book.release_resources()
