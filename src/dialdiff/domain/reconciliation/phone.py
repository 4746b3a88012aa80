"""Phone canonicalization.

Raw phone values mix trunk codes, country codes and noise from repeated or
concatenated telephone fields. ``canonicalize_phone`` recovers a best-effort
national-significant number, or returns an empty string to reject the value.

Admissibility (numeric floors, blocked prefixes) is a separate concern handled
by :mod:`dialdiff.domain.reconciliation.policy`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from dialdiff.domain.model import CanonicalPhone, RawField, RawValue

MIN_PHONE_LENGTH: Final[int] = 10
MAX_PHONE_LENGTH: Final[int] = 15
PREFIXES_TO_STRIP: Final[tuple[str, ...]] = ("91", "0", "00", "+91", "091")

_NON_DIGIT = re.compile(r"[^\d+]")
_OVERFLOW_SEGMENT = re.compile(r"\+?\d{10,12}")


def canonicalize_phone(raw: RawField) -> CanonicalPhone:
    """Return the canonical digit string for ``raw`` or ``""`` when rejected."""

    cleaned = clean_phone(raw)
    if not cleaned:
        return ""

    if len(cleaned) > MAX_PHONE_LENGTH:
        cleaned = extract_overflow_segment(cleaned)
        if not cleaned:
            return ""

    cleaned = strip_prefixes(cleaned)

    if len(cleaned) < MIN_PHONE_LENGTH:
        return ""
    return cleaned


def clean_phone(raw: RawField) -> str:
    """Keep digits and a single leading ``+``; take the first element of sequences."""

    value = _first_value(raw)
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float):
        if not value.is_integer():
            return ""
        value = int(value)

    text = str(value).strip()
    leading_plus = text.startswith("+")
    digits = _NON_DIGIT.sub("", text).replace("+", "")
    if not digits:
        return ""
    return f"+{digits}" if leading_plus else digits


def extract_overflow_segment(cleaned: str) -> str:
    """Pick the first 10-12 digit run (optionally ``+``-prefixed) from an overlong value."""

    match = _OVERFLOW_SEGMENT.search(cleaned)
    return match.group(0) if match else ""


def strip_prefixes(cleaned: str) -> str:
    """Strip trunk/country prefixes from numbers longer than ten characters.

    One pass walks ``PREFIXES_TO_STRIP`` in order and removes each matching
    prefix once. Passes repeat while the value is still too long and the last
    pass changed it, so a canonical phone is a fixed point.
    """

    current = cleaned
    while len(current) > MIN_PHONE_LENGTH:
        stripped = _strip_prefix_pass(current)
        if stripped == current:
            break
        current = stripped
    return current


def _strip_prefix_pass(value: str) -> str:
    for prefix in PREFIXES_TO_STRIP:
        if value.startswith(prefix):
            value = value[len(prefix) :]
    return value


def _first_value(raw: RawField) -> RawValue:
    if isinstance(raw, (list, tuple)):
        return raw[0] if raw else None
    return raw
