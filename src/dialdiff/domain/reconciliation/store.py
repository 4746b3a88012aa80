"""Per-corpus identity stores and their insertion policies.

Master insertion is an unconditional upsert: the master list is ground truth
and keeps every known number. Comparison insertion resolves placeholder names
and runs the :class:`FilterPolicy` before a conditional upsert. Both paths
count every extracted occurrence in ``duplicate_frequency``, whether or not
the identity is kept.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from .names import resolve_display_name

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dialdiff.domain.model import CanonicalPhone, Corpus, Identity

    from .policy import FilterPolicy

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationStore:
    """Identities of one corpus keyed by canonical phone."""

    corpus: Corpus
    identities: dict[CanonicalPhone, Identity] = field(default_factory=dict[str, "Identity"])
    duplicate_frequency: Counter[CanonicalPhone] = field(default_factory=Counter[str])
    _short_index: set[str] = field(default_factory=set[str], repr=False)

    def __len__(self) -> int:
        return len(self.identities)

    def __contains__(self, phone: object) -> bool:
        return phone in self.identities

    def __iter__(self) -> Iterator[Identity]:
        return iter(self.identities.values())

    def get(self, phone: CanonicalPhone) -> Identity | None:
        return self.identities.get(phone)

    def record_occurrence(self, phone: CanonicalPhone) -> None:
        self.duplicate_frequency[phone] += 1

    def upsert(self, identity: Identity) -> None:
        self.identities[identity.phone] = identity
        self._short_index.add(identity.short_phone)

    def has_subscriber(self, phone: CanonicalPhone) -> bool:
        """True when ``phone`` or its trailing ten characters match a stored key."""

        return phone in self.identities or phone[-10:] in self._short_index

    @property
    def total_occurrences(self) -> int:
        return sum(self.duplicate_frequency.values())

    def frequency_table(self, *, min_count: int = 1) -> list[tuple[CanonicalPhone, int]]:
        """Return ``(phone, count)`` pairs, most frequent first."""

        return [
            (phone, count)
            for phone, count in self.duplicate_frequency.most_common()
            if count >= min_count
        ]


def add_master_identity(store: ReconciliationStore, identity: Identity) -> None:
    """Last writer for a phone wins."""

    store.record_occurrence(identity.phone)
    store.upsert(identity)


def add_compare_identity(
    store: ReconciliationStore,
    identity: Identity,
    *,
    policy: FilterPolicy,
) -> bool:
    """Filter and upsert a comparison identity. Return whether it was admitted."""

    store.record_occurrence(identity.phone)
    resolved = replace(
        identity,
        name=resolve_display_name(
            identity.name,
            identity.phone,
            prefix=policy.placeholder_prefix,
        ),
    )
    rejection = policy.rejection(resolved, is_new=resolved.phone not in store)
    if rejection is not None:
        log.debug("Dropped %s (%s): %s", resolved.phone, resolved.name, rejection)
        return False
    store.upsert(resolved)
    return True
