from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from dialdiff.adapters.filesystem import SourceDirectoryError
from dialdiff.app import find_missing_contacts
from dialdiff.config import MissingConfig, OutputConfig, OutputFormat
from dialdiff.domain.model import Identity, MissingOrder
from tests.helpers.contacts import write_csv, write_vcf

if TYPE_CHECKING:
    from pathlib import Path


def _populate(master_dir: Path, compare_dir: Path) -> None:
    write_vcf(master_dir / "phone.vcf", [("X", ["+91 90000 00001"])])
    (master_dir / "notes.txt").write_text("not a contact file", encoding="utf-8")
    write_csv(
        compare_dir / "export.csv",
        ["Name", "Phone"],
        [
            ["X", "9000000001"],
            ["Y", "9000000002"],
            ["spam caller", "9123456789"],
            ["", "9000000003"],
        ],
    )


def test_find_missing_contacts_end_to_end(
    master_dir: Path, compare_dir: Path, output_dir: Path
) -> None:
    _populate(master_dir, compare_dir)

    result = find_missing_contacts(
        master_dir,
        compare_dir,
        output=OutputConfig(output_dir=output_dir, output_format=OutputFormat.BOTH),
    )

    assert result.missing.identities == (
        Identity(phone="9000000003", name="Unknown 00003"),
        Identity(phone="9000000002", name="Y"),
    )
    assert result.stats.total_files == 3
    assert result.stats.skipped_files == 1
    assert result.stats.processed_files == 2
    assert result.stats.total_compare == 4
    assert result.stats.unique_compare == 3
    assert {path.name for path in result.outputs} == {
        "missing-contacts.vcf",
        "missing-contacts.xlsx",
        "master_numbers.json",
        "compare_numbers.json",
        "missing_numbers.json",
        "duplicates.json",
        "run_stats.json",
    }
    assert all(path.exists() for path in result.outputs)
    vcard = (output_dir / "missing-contacts.vcf").read_text(encoding="utf-8")
    assert "TEL;TYPE=CELL:9000000002" in vcard


def test_phone_order_and_no_reports(
    master_dir: Path, compare_dir: Path, output_dir: Path
) -> None:
    _populate(master_dir, compare_dir)

    result = find_missing_contacts(
        master_dir,
        compare_dir,
        missing=MissingConfig(order=MissingOrder.PHONE),
        output=OutputConfig(output_dir=output_dir, write_reports=False),
    )

    assert [identity.phone for identity in result.missing.identities] == [
        "9000000002",
        "9000000003",
    ]
    assert [path.name for path in result.outputs] == ["missing-contacts.vcf"]
    assert not (output_dir / "run_stats.json").exists()


def test_unreadable_file_is_reported_and_skipped(
    master_dir: Path, compare_dir: Path, output_dir: Path
) -> None:
    _populate(master_dir, compare_dir)
    (compare_dir / "broken.xlsx").write_text("definitely not a workbook", encoding="utf-8")

    result = find_missing_contacts(
        master_dir,
        compare_dir,
        output=OutputConfig(output_dir=output_dir),
    )

    assert result.stats.errors == 1
    assert result.stats.failures[0].path.name == "broken.xlsx"
    assert len(result.missing) == 2
    stats_payload = json.loads((output_dir / "run_stats.json").read_text(encoding="utf-8"))
    assert stats_payload["errors"] == 1


def test_missing_corpus_directory_is_fatal(master_dir: Path, tmp_path: Path) -> None:
    with pytest.raises(SourceDirectoryError):
        find_missing_contacts(
            master_dir,
            tmp_path / "absent",
            output=OutputConfig(output_dir=tmp_path / "out"),
        )
