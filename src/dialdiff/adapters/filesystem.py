"""Corpus directory discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final

from dialdiff.domain.model import SchemaKind
from dialdiff.domain.ports import SourceFile

if TYPE_CHECKING:
    from collections.abc import Iterator

SCHEMA_BY_EXTENSION: Final[dict[str, SchemaKind]] = {
    ".vcf": SchemaKind.STRUCTURED_CARD,
    ".csv": SchemaKind.TABULAR,
    ".xlsx": SchemaKind.TABULAR,
    ".xls": SchemaKind.TABULAR,
}

log = logging.getLogger(__name__)


class SourceDirectoryError(FileNotFoundError):
    """Raised when a corpus base directory is missing or not a directory."""


def schema_for(path: Path) -> SchemaKind | None:
    return SCHEMA_BY_EXTENSION.get(path.suffix.lower())


def discover_sources(root: str | os.PathLike[str]) -> Iterator[SourceFile]:
    """Return every file below ``root`` in a deterministic, depth-first order.

    The directory is checked eagerly; the files themselves are listed lazily.
    """

    base = Path(root)
    if not base.is_dir():
        raise SourceDirectoryError(f"Corpus directory not found: {base}")
    return _walk(base)


def _walk(directory: Path) -> Iterator[SourceFile]:
    for entry in sorted(directory.iterdir(), key=lambda path: path.name):
        if entry.is_dir():
            yield from _walk(entry)
        elif entry.is_file():
            yield SourceFile(path=entry, kind=schema_for(entry))
        else:
            log.debug("Ignoring non-regular path %s", entry)
