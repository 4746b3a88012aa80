"""Identity extraction configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from dialdiff.domain.reconciliation.extract import (
    DEFAULT_FIRST_NAME_COLUMN,
    DEFAULT_LAST_NAME_COLUMN,
    DEFAULT_NAME_COLUMNS,
    DEFAULT_PHONE_COLUMNS,
    IdentityExtractor,
)

from .env import env_flag, env_list


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    phone_columns: tuple[str, ...] = DEFAULT_PHONE_COLUMNS
    name_columns: tuple[str, ...] = DEFAULT_NAME_COLUMNS
    first_name_column: str = DEFAULT_FIRST_NAME_COLUMN
    last_name_column: str = DEFAULT_LAST_NAME_COLUMN
    permissive: bool = False

    def build_extractor(self) -> IdentityExtractor:
        return IdentityExtractor(
            phone_columns=self.phone_columns,
            name_columns=self.name_columns,
            first_name_column=self.first_name_column,
            last_name_column=self.last_name_column,
            permissive=self.permissive,
        )


def get_extraction_config(*, permissive: bool | None = None) -> ExtractionConfig:
    return ExtractionConfig(
        phone_columns=env_list("DIALDIFF_PHONE_COLUMNS", DEFAULT_PHONE_COLUMNS),
        name_columns=env_list("DIALDIFF_NAME_COLUMNS", DEFAULT_NAME_COLUMNS),
        permissive=(
            permissive
            if permissive is not None
            else env_flag("DIALDIFF_PERMISSIVE_COLUMNS", default=False)
        ),
    )
