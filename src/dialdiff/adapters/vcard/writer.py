"""Serialize identities as a vCard 3.0 file."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import vobject

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from dialdiff.domain.model import Identity

log = logging.getLogger(__name__)


def identity_to_vcard(identity: Identity) -> vobject.base.Component:
    card = vobject.vCard()
    display_name = identity.name or identity.phone
    card.add("fn").value = display_name
    card.add("n").value = vobject.vcard.Name(given=display_name)
    tel = card.add("tel")
    tel.value = identity.phone
    tel.type_param = "CELL"
    return card


def write_vcards(identities: Iterable[Identity], path: Path) -> int:
    """Write one card per identity to ``path`` and return the number written."""

    path.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with path.open("w", encoding="utf-8", newline="") as handle:
        for identity in identities:
            handle.write(identity_to_vcard(identity).serialize())
            written += 1
    log.info("Wrote %s cards to %s", written, path)
    return written
