"""Record reader dispatching on file extension."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from .tabular import read_csv_rows, read_legacy_workbook_rows, read_workbook_rows
from .vcard import read_vcards

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from pathlib import Path

    from dialdiff.domain.model import RawRecord
    from dialdiff.domain.ports import SourceFile

_READERS: Final[dict[str, Callable[[Path], Iterable[RawRecord]]]] = {
    ".vcf": read_vcards,
    ".csv": read_csv_rows,
    ".xlsx": read_workbook_rows,
    ".xls": read_legacy_workbook_rows,
}


class UnsupportedSourceError(ValueError):
    """Raised when no reader handles a file's extension."""


def read_records(source: SourceFile) -> Iterator[RawRecord]:
    """Default :class:`~dialdiff.domain.ports.RecordReader` for files on disk."""

    reader = _READERS.get(source.path.suffix.lower())
    if reader is None:
        raise UnsupportedSourceError(f"No reader for {source.path.suffix!r} files: {source.path}")
    yield from reader(source.path)
