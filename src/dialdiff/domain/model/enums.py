"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class SchemaKind(StrEnum):
    """Shape of the raw records a source file decodes into."""

    STRUCTURED_CARD = "structured-card"
    TABULAR = "tabular"


class Corpus(StrEnum):
    MASTER = "master"
    COMPARE = "compare"


class MissingOrder(StrEnum):
    NAME = "name"
    PHONE = "phone"
