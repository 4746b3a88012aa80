"""Display-name cleanup and placeholder synthesis."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from dialdiff.domain.model import RawField

# Devanagari and Arabic blocks are listed explicitly because their combining
# vowel signs are not matched by ``\w``.
_DISALLOWED = re.compile(r"[^\w\s\u0900-\u097F\u0600-\u06FF+/()\[\]]")
_WHITESPACE = re.compile(r"\s+")
_EDGE_SLASHES = re.compile(r"^[\s/]+|[\s/]+$")
_PLACEHOLDER_NAME = re.compile(r"^(?:name|caller)", re.IGNORECASE)

DEFAULT_PLACEHOLDER_PREFIX: Final[str] = "Unknown"


def normalize_name(raw: RawField) -> str:
    """Clean ``raw`` for use as a display key. Idempotent."""

    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    if raw is None:
        return ""
    text = _DISALLOWED.sub("", str(raw))
    text = _WHITESPACE.sub(" ", text)
    return _EDGE_SLASHES.sub("", text)


def is_placeholder_name(name: str, phone: str) -> bool:
    """True for names that carry no information beyond the number itself."""

    stripped = name.strip()
    return stripped == phone or stripped == "0" or bool(_PLACEHOLDER_NAME.match(stripped))


def placeholder_name(phone: str, *, prefix: str = DEFAULT_PLACEHOLDER_PREFIX) -> str:
    return f"{prefix} {phone[-5:]}"


def resolve_display_name(
    name: str,
    phone: str,
    *,
    prefix: str = DEFAULT_PLACEHOLDER_PREFIX,
) -> str:
    """Fill an empty name with the phone, then swap placeholders for a synthesized tag."""

    resolved = name or phone
    if is_placeholder_name(resolved, phone):
        return placeholder_name(phone, prefix=prefix)
    return resolved
