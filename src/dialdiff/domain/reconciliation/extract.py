"""Derive ``{phone, name}`` identities from raw records of any schema kind.

One record may yield several identities: a card with three telephone fields,
or a row with three phone columns, produces three identities sharing one name.
"""

from __future__ import annotations

import logging
import quopri
from dataclasses import dataclass
from functools import singledispatch
from typing import TYPE_CHECKING, Final

from dialdiff.domain.model import CardField, Identity, StructuredCard, TabularRow

from .names import normalize_name
from .phone import canonicalize_phone

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from dialdiff.domain.model import RawField, RawRecord

DEFAULT_PHONE_COLUMNS: Final[tuple[str, ...]] = (
    "phone",
    "phone_number",
    "mobile",
    "cell",
    "telephone",
    "tel",
    "contact",
    "kc_phone",
)
DEFAULT_NAME_COLUMNS: Final[tuple[str, ...]] = (
    "kc_name",
    "name",
    "full_name",
    "contact_name",
    "first_name",
)
DEFAULT_FIRST_NAME_COLUMN: Final[str] = "first_name"
DEFAULT_LAST_NAME_COLUMN: Final[str] = "last_name"

CARD_PHONE_FIELD: Final[str] = "tel"
CARD_NAME_FIELD: Final[str] = "fn"
_QUOTED_PRINTABLE = frozenset({"QUOTED-PRINTABLE", "QP"})

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentityExtractor:
    """Turn one raw record into zero or more identities."""

    phone_columns: tuple[str, ...] = DEFAULT_PHONE_COLUMNS
    name_columns: tuple[str, ...] = DEFAULT_NAME_COLUMNS
    first_name_column: str = DEFAULT_FIRST_NAME_COLUMN
    last_name_column: str = DEFAULT_LAST_NAME_COLUMN
    permissive: bool = False

    def __call__(self, record: RawRecord) -> list[Identity]:
        return _identities_for(record, self)

    def candidate_phone_columns(self, row: Mapping[str, RawField]) -> Iterator[str]:
        if self.permissive:
            yield from row
            return
        for column in self.phone_columns:
            yield column.strip().lower()

    def row_name(self, row: Mapping[str, RawField]) -> str:
        first_name_column = self.first_name_column.strip().lower()
        for column in self.name_columns:
            key = column.strip().lower()
            value = row.get(key)
            if _is_blank(value):
                continue
            if key == first_name_column:
                last = row.get(self.last_name_column.strip().lower())
                combined = f"{_text(value)} {'' if _is_blank(last) else _text(last)}"
                return normalize_name(combined.strip())
            return normalize_name(_text(value))
        return ""


@singledispatch
def _identities_for(record: object, _extractor: IdentityExtractor) -> list[Identity]:
    raise TypeError(f"Unsupported raw record: {type(record).__name__}")


@_identities_for.register
def _(record: StructuredCard, _extractor: IdentityExtractor) -> list[Identity]:
    name = _card_name(record)
    identities: list[Identity] = []
    for tel in record.get_all(CARD_PHONE_FIELD):
        phone = canonicalize_phone(tel.value)
        if not phone:
            log.debug("Rejected card phone value %r", tel.value)
            continue
        identities.append(Identity(phone=phone, name=name))
    return identities


@_identities_for.register
def _(record: TabularRow, extractor: IdentityExtractor) -> list[Identity]:
    row = _lowercase_keys(record.values)
    name = extractor.row_name(row)
    identities: list[Identity] = []
    for column in extractor.candidate_phone_columns(row):
        value = row.get(column)
        if _is_blank(value):
            continue
        phone = canonicalize_phone(value)
        if not phone:
            log.debug("Rejected %s value %r", column, value)
            continue
        identities.append(Identity(phone=phone, name=name))
    return identities


def _card_name(card: StructuredCard) -> str:
    formatted = card.get_first(CARD_NAME_FIELD)
    if formatted is None:
        return ""
    return normalize_name(_decoded_value(formatted))


def _decoded_value(card_field: CardField) -> str:
    encoding = (card_field.param("ENCODING") or "").upper()
    if encoding not in _QUOTED_PRINTABLE:
        return card_field.value
    charset = card_field.param("CHARSET") or "utf-8"
    raw = quopri.decodestring(card_field.value.encode("utf-8"))
    try:
        return raw.decode(charset, errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def _lowercase_keys(values: Mapping[str, RawField]) -> dict[str, RawField]:
    row: dict[str, RawField] = {}
    for key, value in values.items():
        normalized = str(key).strip().lower()
        # first occurrence wins when two headers differ only by case/spacing
        row.setdefault(normalized, value)
    return row


def _first(value: RawField) -> object:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _is_blank(value: RawField) -> bool:
    first = _first(value)
    return first is None or (isinstance(first, str) and not first.strip())


def _text(value: RawField) -> str:
    first = _first(value)
    if isinstance(first, float) and first.is_integer():
        first = int(first)
    return "" if first is None else str(first).strip()
