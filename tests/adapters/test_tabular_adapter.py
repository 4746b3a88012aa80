from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import xlrd
from openpyxl import Workbook, load_workbook

from dialdiff.adapters.readers import read_records
from dialdiff.adapters.tabular import (
    read_csv_rows,
    read_legacy_workbook_rows,
    read_workbook_rows,
    write_workbook,
)
from dialdiff.domain.model import Identity, SchemaKind
from dialdiff.domain.ports import SourceFile
from tests.helpers.contacts import write_csv

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_read_csv_rows_trims_headers_and_skips_blank_lines(tmp_path: Path) -> None:
    path = write_csv(
        tmp_path / "contacts.csv",
        [" Name ", "Phone"],
        [["Amit", " 9876543210"], ["", ""], ["Zoe", "9000000001"]],
    )

    rows = list(read_csv_rows(path))

    assert [row.kind for row in rows] == [SchemaKind.TABULAR, SchemaKind.TABULAR]
    assert dict(rows[0].values) == {"Name": "Amit", "Phone": "9876543210"}
    assert rows[1].values["Name"] == "Zoe"


def test_read_csv_rows_drops_overflow_cells(tmp_path: Path) -> None:
    path = tmp_path / "ragged.csv"
    path.write_text("name,phone\nAmit,9876543210,extra\n", encoding="utf-8")

    (row,) = read_csv_rows(path)

    assert row.columns() == ("name", "phone")


def test_read_workbook_rows_uses_first_sheet_header(tmp_path: Path) -> None:
    path = tmp_path / "contacts.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(["Name", "Mobile", None])
    sheet.append(["Amit", 9876543210, None])
    sheet.append([None, None, None])
    sheet.append(["Zoe", "9000000001", "ignored"])
    workbook.save(path)

    rows = list(read_workbook_rows(path))

    assert len(rows) == 2
    assert dict(rows[0].values) == {"Name": "Amit", "Mobile": 9876543210}
    assert dict(rows[1].values) == {"Name": "Zoe", "Mobile": "9000000001"}


def test_write_workbook_writes_header_and_rows(tmp_path: Path) -> None:
    path = tmp_path / "out" / "missing.xlsx"

    written = write_workbook(
        [Identity(phone="9876543210", name="Amit"), Identity(phone="9000000001", name="Zoe")],
        path,
    )

    sheet = load_workbook(path).active
    assert written == 2
    assert sheet.title == "Missing"
    assert [cell.value for cell in sheet[1]] == ["Name", "Phone"]
    assert sheet["A1"].font.bold
    assert [cell.value for cell in sheet[2]] == ["Amit", "9876543210"]
    assert sheet.max_row == 3


@dataclass
class FakeSheet:
    rows: list[list[object]]
    name: str = "Sheet1"

    @property
    def nrows(self) -> int:
        return len(self.rows)

    def row_values(self, index: int) -> list[object]:
        return self.rows[index]


@dataclass
class FakeBook:
    sheets: list[FakeSheet]
    opened: list[str] = field(default_factory=list[str])
    released: bool = False

    @property
    def nsheets(self) -> int:
        return len(self.sheets)

    def sheet_by_index(self, index: int) -> FakeSheet:
        return self.sheets[index]

    def release_resources(self) -> None:
        self.released = True


def _patch_xlrd(monkeypatch: pytest.MonkeyPatch, book: FakeBook) -> None:
    def fake_open_workbook(filename: str, **_: object) -> FakeBook:
        book.opened.append(filename)
        return book

    monkeypatch.setattr(xlrd, "open_workbook", fake_open_workbook)


def test_read_legacy_workbook_rows_uses_first_sheet_header(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    book = FakeBook(
        [
            FakeSheet(
                [
                    [" Name ", "Mobile", ""],
                    ["Amit", 9876543210.0, ""],
                    ["", "", ""],
                    ["Zoe", "9000000001", "ignored"],
                ]
            ),
            FakeSheet([["Other"], ["skipped"]]),
        ]
    )
    _patch_xlrd(monkeypatch, book)
    path = tmp_path / "legacy.xls"

    rows = list(read_legacy_workbook_rows(path))

    assert book.opened == [str(path)]
    assert [dict(row.values) for row in rows] == [
        {"Name": "Amit", "Mobile": 9876543210.0},
        {"Name": "Zoe", "Mobile": "9000000001"},
    ]
    assert book.released


def test_read_legacy_workbook_rows_handles_empty_sheet(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    book = FakeBook([FakeSheet([])])
    _patch_xlrd(monkeypatch, book)

    assert list(read_legacy_workbook_rows(tmp_path / "empty.xls")) == []
    assert book.released


def test_xls_sources_are_read_with_xlrd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    book = FakeBook([FakeSheet([["name", "phone"], ["Amit", "9876543210"]])])
    _patch_xlrd(monkeypatch, book)
    path = tmp_path / "contacts.xls"

    (row,) = read_records(SourceFile(path=path, kind=SchemaKind.TABULAR))

    assert book.opened == [str(path)]
    assert dict(row.values) == {"name": "Amit", "phone": "9876543210"}
