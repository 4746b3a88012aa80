"""Ports implemented by adapters."""

from __future__ import annotations

from .reading import RecordReader, SourceFile

__all__ = ["RecordReader", "SourceFile"]
