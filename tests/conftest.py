from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_dialdiff_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("DIALDIFF_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def master_dir(tmp_path: Path) -> Path:
    path = tmp_path / "master"
    path.mkdir()
    return path


@pytest.fixture
def compare_dir(tmp_path: Path) -> Path:
    path = tmp_path / "compare"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"
