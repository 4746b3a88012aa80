"""Decode vCard files into structured-card records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import vobject

from dialdiff.domain.model import CardField, StructuredCard

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from vobject.base import Component, ContentLine

log = logging.getLogger(__name__)


def read_vcards(path: Path) -> Iterator[StructuredCard]:
    """Lazily yield one :class:`StructuredCard` per ``VCARD`` component in ``path``."""

    text = path.read_text(encoding="utf-8-sig", errors="replace")
    count = 0
    for component in vobject.readComponents(text, ignoreUnreadable=True, allowQP=True):
        if component.name.upper() != "VCARD":
            log.debug("Skipping %s component in %s", component.name, path)
            continue
        count += 1
        yield card_from_component(component)
    log.debug("Read %s cards from %s", count, path)


def card_from_component(component: Component) -> StructuredCard:
    return StructuredCard.from_pairs(
        (name, _card_field(line))
        for name, lines in component.contents.items()
        for line in lines
    )


def _card_field(line: ContentLine) -> CardField:
    value = line.value
    text = value if isinstance(value, str) else str(value)
    params = {
        key.upper(): ",".join(str(item) for item in values) for key, values in line.params.items()
    }
    return CardField(value=text, params=params)
