"""Public interface for the vCard adapter."""

from __future__ import annotations

from .reader import card_from_component, read_vcards
from .writer import identity_to_vcard, write_vcards

__all__ = [
    "card_from_component",
    "identity_to_vcard",
    "read_vcards",
    "write_vcards",
]
