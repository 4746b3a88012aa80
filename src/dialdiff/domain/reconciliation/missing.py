"""Set difference between the comparison and master stores.

A comparison identity is missing when the master store holds neither its full
phone nor its trailing ten digits. The result is ordered by name
(case-insensitive) unless phone order is requested, and same-named entries can
be made unique by numbering them ``"<name> (<k>)"``.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from dialdiff.domain.model import MissingOrder

from .phone import canonicalize_phone

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dialdiff.domain.model import Identity

    from .store import ReconciliationStore


@dataclass(frozen=True, slots=True)
class MissingSet:
    """Ordered missing identities plus the duplicate-name index built while finding them."""

    identities: tuple[Identity, ...]
    name_frequency: Counter[str] = field(default_factory=Counter[str])

    def __len__(self) -> int:
        return len(self.identities)

    def name_frequency_table(self, *, min_count: int = 1) -> list[tuple[str, int]]:
        return [
            (name, count)
            for name, count in self.name_frequency.most_common()
            if count >= min_count
        ]


def find_missing(
    compare: ReconciliationStore,
    master: ReconciliationStore,
) -> tuple[list[Identity], Counter[str]]:
    """Return missing identities in comparison-store order and their lowercased-name counts."""

    missing: list[Identity] = []
    name_frequency: Counter[str] = Counter()
    for phone, identity in compare.identities.items():
        short_phone = canonicalize_phone(phone)[-10:]
        if master.has_subscriber(phone) or (short_phone and master.has_subscriber(short_phone)):
            continue
        missing.append(identity)
        name_frequency[identity.name.lower()] += 1
    return missing, name_frequency


def sort_by_name(identities: Iterable[Identity]) -> list[Identity]:
    return sorted(identities, key=lambda identity: identity.name.lower())


def sort_by_phone(identities: Iterable[Identity]) -> list[Identity]:
    return sorted(identities, key=_phone_sort_key)


def number_duplicate_names(
    name_sorted: Sequence[Identity],
    name_frequency: Counter[str],
) -> list[Identity]:
    """Rename runs of same-named neighbours to ``"<name> (<k>)"``.

    ``name_sorted`` must already be ordered by lowercased name so that equal
    names are adjacent. A new list is returned; the input is not modified.
    """

    renamed: list[Identity] = []
    previous: str | None = None
    counter = 0
    for identity in name_sorted:
        lowered = identity.name.lower()
        if name_frequency[lowered] <= 1:
            renamed.append(identity)
            previous = lowered
            counter = 0
            continue
        counter = counter + 1 if lowered == previous else 1
        previous = lowered
        renamed.append(replace(identity, name=f"{identity.name} ({counter})"))
    return renamed


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingSetComputer:
    """Compute the final, ordered missing set."""

    order: MissingOrder = MissingOrder.NAME
    unique_names: bool = True

    def __call__(
        self,
        compare: ReconciliationStore,
        master: ReconciliationStore,
    ) -> MissingSet:
        found, name_frequency = find_missing(compare, master)
        ordered = sort_by_name(found)
        if self.unique_names:
            ordered = number_duplicate_names(ordered, name_frequency)
        if self.order is MissingOrder.PHONE:
            ordered = sort_by_phone(ordered)
        return MissingSet(identities=tuple(ordered), name_frequency=name_frequency)


def _phone_sort_key(identity: Identity) -> tuple[int, str]:
    digits = identity.phone.removeprefix("+")
    return (int(digits) if digits.isdigit() else 0, identity.phone)
