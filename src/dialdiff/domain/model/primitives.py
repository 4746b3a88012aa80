"""Domain primitives: scalar aliases + small value objects.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from dataclasses import dataclass

type CanonicalPhone = str
type RawValue = str | int | float | None
type RawField = RawValue | list[RawValue] | tuple[RawValue, ...]


@dataclass(frozen=True, slots=True)
class Identity:
    """A ``{phone, name}`` pair extracted from one raw record."""

    phone: CanonicalPhone
    name: str = ""

    @property
    def short_phone(self) -> str:
        """Trailing ten characters of the phone, used for subscriber matching."""
        return self.phone[-10:]
