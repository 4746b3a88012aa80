from __future__ import annotations

import re

import pytest

from dialdiff.domain.reconciliation.phone import (
    canonicalize_phone,
    clean_phone,
    extract_overflow_segment,
    strip_prefixes,
)

_CANONICAL = re.compile(r"^\+?\d+$")

SAMPLE_INPUTS = [
    "0091-9876543210",
    "+91 98765 43210",
    "919876543210",
    "09876543210",
    "98765-43210 ext",
    "+44 20 7946 0958",
    "91987654321098765432",
    9876543210,
    9876543210.0,
    ["9123456789", "9000000000"],
]


def test_prefix_stripping_handles_double_zero_country_code() -> None:
    assert clean_phone("0091-9876543210") == "00919876543210"
    assert canonicalize_phone("0091-9876543210") == "9876543210"


def test_overflow_value_extracts_first_digit_run() -> None:
    assert extract_overflow_segment("91987654321098765432") == "919876543210"
    assert canonicalize_phone("91987654321098765432") == "9876543210"


def test_short_values_are_rejected() -> None:
    assert canonicalize_phone("12345") == ""


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", True, 98.5, [], ()])
def test_unusable_values_are_rejected(raw: object) -> None:
    assert canonicalize_phone(raw) == ""  # type: ignore[arg-type]


def test_only_a_leading_plus_is_kept() -> None:
    assert clean_phone(" +44 (20) 7946-0958 ") == "+442079460958"
    assert clean_phone("98765+43210") == "9876543210"


def test_sequence_values_use_first_element() -> None:
    assert canonicalize_phone(["+919123456789", "9876543210"]) == "9123456789"


def test_integral_floats_render_as_integers() -> None:
    assert canonicalize_phone(9876543210.0) == "9876543210"


def test_foreign_numbers_keep_their_country_code() -> None:
    assert canonicalize_phone("+44 20 7946 0958") == "+442079460958"


def test_strip_prefixes_leaves_ten_digit_numbers_alone() -> None:
    assert strip_prefixes("9198765432") == "9198765432"
    assert strip_prefixes("0919876543210") == "9876543210"


@pytest.mark.parametrize("raw", SAMPLE_INPUTS)
def test_canonicalization_is_idempotent(raw: object) -> None:
    once = canonicalize_phone(raw)  # type: ignore[arg-type]

    assert once
    assert canonicalize_phone(once) == once


@pytest.mark.parametrize("raw", SAMPLE_INPUTS)
def test_canonical_phones_satisfy_length_invariant(raw: object) -> None:
    phone = canonicalize_phone(raw)  # type: ignore[arg-type]

    assert 10 <= len(phone) <= 15
    assert _CANONICAL.match(phone)


def test_repeated_prefix_passes_can_strip_into_rejection() -> None:
    assert strip_prefixes("919191234567890") == "234567890"
    assert canonicalize_phone("919191234567890") == ""


def test_single_pass_would_leave_a_non_canonical_value() -> None:
    # "+91" then "0" trunk digit: a second pass is needed to reach a fixed point
    assert canonicalize_phone("+91 0 98765 43210") == "9876543210"
