"""Comparison filter configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from dialdiff.domain.reconciliation.names import DEFAULT_PLACEHOLDER_PREFIX
from dialdiff.domain.reconciliation.policy import (
    DEFAULT_BLOCKED_KEYWORDS,
    DEFAULT_BLOCKED_PREFIXES,
    DEFAULT_BLOCKED_SUFFIXES,
    DEFAULT_PHONE_FLOOR,
    FilterPolicy,
)

from .env import env_int, env_list, env_str


@dataclass(frozen=True, slots=True)
class FilterConfig:
    blocked_keywords: tuple[str, ...] = DEFAULT_BLOCKED_KEYWORDS
    blocked_prefixes: tuple[str, ...] = DEFAULT_BLOCKED_PREFIXES
    blocked_suffixes: tuple[str, ...] = DEFAULT_BLOCKED_SUFFIXES
    phone_floor: int = DEFAULT_PHONE_FLOOR
    placeholder_prefix: str = DEFAULT_PLACEHOLDER_PREFIX

    def build_policy(self) -> FilterPolicy:
        return FilterPolicy(
            blocked_keywords=tuple(keyword.lower() for keyword in self.blocked_keywords),
            blocked_prefixes=self.blocked_prefixes,
            blocked_suffixes=self.blocked_suffixes,
            phone_floor=self.phone_floor,
            placeholder_prefix=self.placeholder_prefix,
        )


def get_filter_config() -> FilterConfig:
    return FilterConfig(
        blocked_keywords=env_list("DIALDIFF_BLOCKED_KEYWORDS", DEFAULT_BLOCKED_KEYWORDS),
        blocked_prefixes=env_list("DIALDIFF_BLOCKED_PREFIXES", DEFAULT_BLOCKED_PREFIXES),
        blocked_suffixes=env_list("DIALDIFF_BLOCKED_SUFFIXES", DEFAULT_BLOCKED_SUFFIXES),
        phone_floor=env_int("DIALDIFF_PHONE_FLOOR", DEFAULT_PHONE_FLOOR, minimum=0),
        placeholder_prefix=env_str("DIALDIFF_PLACEHOLDER_PREFIX", DEFAULT_PLACEHOLDER_PREFIX),
    )
