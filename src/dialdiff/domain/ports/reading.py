"""Ports for reading raw records out of source files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from dialdiff.domain.model import RawRecord, SchemaKind


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A file discovered in a corpus directory.

    ``kind`` is ``None`` for files no reader understands; the engine counts
    and skips those.
    """

    path: Path
    kind: SchemaKind | None


@runtime_checkable
class RecordReader(Protocol):
    """Callable port producing a lazy, finite stream of raw records for one file.

    The stream is not restartable; reading the file again means calling the
    reader again.
    """

    def __call__(self, source: SourceFile) -> Iterable[RawRecord]: ...


__all__ = ["RecordReader", "SourceFile"]
