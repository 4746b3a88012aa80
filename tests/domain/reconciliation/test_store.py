from __future__ import annotations

from dialdiff.domain.model import Corpus, Identity
from dialdiff.domain.reconciliation import (
    FilterPolicy,
    ReconciliationStore,
    add_compare_identity,
    add_master_identity,
)


def test_master_upsert_last_write_wins() -> None:
    store = ReconciliationStore(Corpus.MASTER)

    for phone, name in zip(["111", "222", "111"], ["A", "B", "C"], strict=True):
        add_master_identity(store, Identity(phone=phone, name=name))

    assert store.identities["111"].name == "C"
    assert store.duplicate_frequency["111"] == 2
    assert store.duplicate_frequency["222"] == 1
    assert len(store) == 2
    assert store.total_occurrences == 3


def test_blocked_comparison_identity_is_still_counted() -> None:
    store = ReconciliationStore(Corpus.COMPARE)
    policy = FilterPolicy(blocked_keywords=("spam",))

    admitted = add_compare_identity(
        store, Identity(phone="9123456789", name="spam caller"), policy=policy
    )

    assert not admitted
    assert "9123456789" not in store.identities
    assert store.duplicate_frequency["9123456789"] == 1


def test_comparison_placeholder_names_are_synthesized() -> None:
    store = ReconciliationStore(Corpus.COMPARE)
    policy = FilterPolicy()

    add_compare_identity(store, Identity(phone="9876543210", name=""), policy=policy)
    add_compare_identity(store, Identity(phone="9123456789", name="Caller 3"), policy=policy)

    assert store.identities["9876543210"].name == "Unknown 43210"
    assert store.identities["9123456789"].name == "Unknown 56789"


def test_comparison_repeat_with_real_name_overwrites() -> None:
    store = ReconciliationStore(Corpus.COMPARE)
    policy = FilterPolicy()

    add_compare_identity(store, Identity(phone="9876543210", name="Amit"), policy=policy)
    add_compare_identity(store, Identity(phone="9876543210", name="Amit Shah"), policy=policy)

    assert store.identities["9876543210"].name == "Amit Shah"
    assert store.duplicate_frequency["9876543210"] == 2


def test_has_subscriber_matches_trailing_ten_digits() -> None:
    store = ReconciliationStore(Corpus.MASTER)
    store.upsert(Identity(phone="+919876543210", name="Amit"))

    assert store.has_subscriber("+919876543210")
    assert store.has_subscriber("9876543210")
    assert not store.has_subscriber("9123456789")


def test_frequency_table_filters_and_orders() -> None:
    store = ReconciliationStore(Corpus.MASTER)
    for phone in ["9000000001", "9000000002", "9000000002", "9000000003"]:
        add_master_identity(store, Identity(phone=phone, name="X"))
    add_master_identity(store, Identity(phone="9000000002", name="X"))

    assert store.frequency_table(min_count=2) == [("9000000002", 3)]
    assert store.frequency_table()[0] == ("9000000002", 3)
    assert len(store.frequency_table()) == 3
