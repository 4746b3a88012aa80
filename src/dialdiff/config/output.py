"""Output location configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Final

DEFAULT_VCARD_FILENAME: Final[str] = "missing-contacts.vcf"
DEFAULT_WORKBOOK_FILENAME: Final[str] = "missing-contacts.xlsx"


class OutputFormat(StrEnum):
    VCF = "vcf"
    XLSX = "xlsx"
    BOTH = "both"


@dataclass(frozen=True, slots=True)
class OutputConfig:
    output_dir: Path
    output_format: OutputFormat = OutputFormat.VCF
    vcard_filename: str = DEFAULT_VCARD_FILENAME
    workbook_filename: str = DEFAULT_WORKBOOK_FILENAME
    write_reports: bool = True

    def resolve_output_dir(self) -> Path:
        return self.output_dir.expanduser().resolve()

    def ensure_output_dir(self) -> Path:
        output_dir = self.resolve_output_dir()
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

    @property
    def writes_vcard(self) -> bool:
        return self.output_format in (OutputFormat.VCF, OutputFormat.BOTH)

    @property
    def writes_workbook(self) -> bool:
        return self.output_format in (OutputFormat.XLSX, OutputFormat.BOTH)

    def vcard_path(self) -> Path:
        return self.ensure_output_dir() / self.vcard_filename

    def workbook_path(self) -> Path:
        return self.ensure_output_dir() / self.workbook_filename


def get_output_config(
    *,
    output_dir: Path | None = None,
    output_format: OutputFormat = OutputFormat.VCF,
    write_reports: bool = True,
) -> OutputConfig:
    if output_dir is None:
        env_dir = os.getenv("DIALDIFF_OUTPUT_DIR")
        output_dir = Path(env_dir) if env_dir else Path.cwd()
    return OutputConfig(
        output_dir=output_dir,
        output_format=output_format,
        write_reports=write_reports,
    )
