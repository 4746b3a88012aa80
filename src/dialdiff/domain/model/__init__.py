"""Public domain model surface."""

from __future__ import annotations

from dialdiff.domain.model.enums import Corpus, MissingOrder, SchemaKind
from dialdiff.domain.model.primitives import CanonicalPhone, Identity, RawField, RawValue
from dialdiff.domain.model.records import CardField, RawRecord, StructuredCard, TabularRow

__all__ = [
    "CanonicalPhone",
    "CardField",
    "Corpus",
    "Identity",
    "MissingOrder",
    "RawField",
    "RawRecord",
    "RawValue",
    "SchemaKind",
    "StructuredCard",
    "TabularRow",
]
