"""Public interface for the tabular (CSV / spreadsheet) adapter."""

from __future__ import annotations

from .csv_reader import read_csv_rows
from .legacy import read_legacy_workbook_rows
from .workbook import read_workbook_rows, write_workbook

__all__ = ["read_csv_rows", "read_legacy_workbook_rows", "read_workbook_rows", "write_workbook"]
