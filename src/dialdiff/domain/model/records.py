"""Raw record shapes handed to the engine by record readers.

Readers decode container formats into one of two tagged shapes. The engine
dispatches on ``kind`` and never inspects how a record was produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Literal

from .enums import SchemaKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .primitives import RawField


@dataclass(frozen=True, slots=True)
class CardField:
    """One content line of a structured card, with its parameters."""

    value: str
    params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def param(self, name: str) -> str | None:
        return self.params.get(name.upper())


@dataclass(frozen=True, slots=True)
class StructuredCard:
    """A contact card exposing named, possibly multi-valued fields."""

    kind: ClassVar[Literal[SchemaKind.STRUCTURED_CARD]] = SchemaKind.STRUCTURED_CARD

    fields: Mapping[str, tuple[CardField, ...]]

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, CardField]]) -> StructuredCard:
        grouped: dict[str, list[CardField]] = {}
        for name, card_field in pairs:
            grouped.setdefault(name.lower(), []).append(card_field)
        return cls(
            fields=MappingProxyType({name: tuple(values) for name, values in grouped.items()})
        )

    def get_all(self, name: str) -> tuple[CardField, ...]:
        return self.fields.get(name.lower(), ())

    def get_first(self, name: str) -> CardField | None:
        values = self.get_all(name)
        return values[0] if values else None


@dataclass(frozen=True, slots=True)
class TabularRow:
    """A field-keyed row from a delimited table or spreadsheet sheet."""

    kind: ClassVar[Literal[SchemaKind.TABULAR]] = SchemaKind.TABULAR

    values: Mapping[str, RawField]

    @classmethod
    def from_mapping(cls, row: Mapping[str, RawField]) -> TabularRow:
        return cls(values=MappingProxyType(dict(row)))

    def columns(self) -> tuple[str, ...]:
        return tuple(self.values)


type RawRecord = StructuredCard | TabularRow
