"""Missing-set ordering configuration."""

from __future__ import annotations

from dataclasses import dataclass

from dialdiff.domain.model import MissingOrder
from dialdiff.domain.reconciliation import MissingSetComputer

from .env import env_flag, env_str
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MissingConfig:
    order: MissingOrder = MissingOrder.NAME
    unique_names: bool = True

    def build_computer(self) -> MissingSetComputer:
        return MissingSetComputer(order=self.order, unique_names=self.unique_names)


def get_missing_config(
    *,
    order: MissingOrder | None = None,
    unique_names: bool | None = None,
) -> MissingConfig:
    if order is None:
        raw_order = env_str("DIALDIFF_MISSING_ORDER", MissingOrder.NAME.value)
        try:
            order = MissingOrder(raw_order.lower())
        except ValueError as exc:
            raise ConfigurationError(
                f"DIALDIFF_MISSING_ORDER must be one of name, phone; got {raw_order!r}"
            ) from exc
    if unique_names is None:
        unique_names = env_flag("DIALDIFF_UNIQUE_NAMES", default=True)
    return MissingConfig(order=order, unique_names=unique_names)
