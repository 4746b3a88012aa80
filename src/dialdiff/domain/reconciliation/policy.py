"""Admissibility rules for comparison identities.

The comparison corpus feeds the missing report, so spam, placeholder and
out-of-range numbers are scrubbed here before they can surface as false
"missing" entries. The master corpus is never filtered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from .names import DEFAULT_PLACEHOLDER_PREFIX

if TYPE_CHECKING:
    from dialdiff.domain.model import Identity

DEFAULT_BLOCKED_KEYWORDS: Final[tuple[str, ...]] = ("spam", "fraud", "scam")
DEFAULT_BLOCKED_PREFIXES: Final[tuple[str, ...]] = ("140",)
DEFAULT_BLOCKED_SUFFIXES: Final[tuple[str, ...]] = ()
DEFAULT_PHONE_FLOOR: Final[int] = 6_000_000_000


class Rejection(StrEnum):
    """Why a comparison identity was not admitted."""

    BARE_NUMBER = "bare-number"
    BLOCKED_KEYWORD = "blocked-keyword"
    BELOW_FLOOR = "below-floor"
    BLOCKED_PREFIX = "blocked-prefix"
    BLOCKED_SUFFIX = "blocked-suffix"


@dataclass(frozen=True, slots=True, kw_only=True)
class FilterPolicy:
    """Decide whether a candidate comparison identity may enter the store."""

    blocked_keywords: tuple[str, ...] = DEFAULT_BLOCKED_KEYWORDS
    blocked_prefixes: tuple[str, ...] = DEFAULT_BLOCKED_PREFIXES
    blocked_suffixes: tuple[str, ...] = DEFAULT_BLOCKED_SUFFIXES
    phone_floor: int = DEFAULT_PHONE_FLOOR
    placeholder_prefix: str = DEFAULT_PLACEHOLDER_PREFIX

    def rejection(self, identity: Identity, *, is_new: bool) -> Rejection | None:
        """Return the first failed rule for ``identity``, or ``None`` when admissible."""

        phone = identity.phone
        if not (is_new or phone != identity.name):
            return Rejection.BARE_NUMBER
        lowered = identity.name.lower()
        if any(keyword.lower() in lowered for keyword in self.blocked_keywords if keyword):
            return Rejection.BLOCKED_KEYWORD
        if _numeric_value(phone) <= self.phone_floor:
            return Rejection.BELOW_FLOOR
        if any(phone.startswith(prefix) for prefix in self.blocked_prefixes if prefix):
            return Rejection.BLOCKED_PREFIX
        if any(phone.endswith(suffix) for suffix in self.blocked_suffixes if suffix):
            return Rejection.BLOCKED_SUFFIX
        return None

    def admits(self, identity: Identity, *, is_new: bool) -> bool:
        return self.rejection(identity, is_new=is_new) is None


def _numeric_value(phone: str) -> int:
    digits = phone.removeprefix("+")
    return int(digits) if digits.isdigit() else 0
